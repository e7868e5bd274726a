"""Debug rendering of API values.

stringify() walks a closed set of shapes (None, bool, int, float, str, enums,
Timestamp, sequences, mappings, pydantic models and dataclass records) and produces the same
text for the same input every time. Each call writes into its own buffer, so
the function is safe to call from any number of threads.
"""

import dataclasses
import io
import math
from decimal import Decimal
from enum import Enum

from pydantic import BaseModel

from .timestamp import Timestamp

TYPE_PREFIX = "github"

_INITIALISMS = {
    "acl", "api", "ascii", "cpu", "css", "dns", "eof", "gpg", "guid", "html",
    "http", "https", "id", "ip", "json", "lhs", "qps", "ram", "rhs", "rpc",
    "scim", "sha", "sla", "smtp", "sql", "ssh", "tcp", "tls", "ttl", "udp",
    "ui", "uid", "uri", "url", "utf8", "uuid", "vm", "xml", "xmpp", "xsrf", "xss",
}


def field_label(attr: str) -> str:
    """Exported-style name for a snake_case attribute: node_id -> NodeID, cpus -> CPUs."""
    parts = []
    for word in attr.split("_"):
        if not word:
            continue
        if word in _INITIALISMS:
            parts.append(word.upper())
        elif word.endswith("s") and word[:-1] in _INITIALISMS:
            parts.append(word[:-1].upper() + "s")
        else:
            parts.append(word[0].upper() + word[1:])
    return "".join(parts)


def format_float(value: float) -> str:
    """Shortest round-tripping form, switching to exponent notation like Go's %v."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    if value == 0:
        return "-0" if math.copysign(1.0, value) < 0 else "0"

    sign, digit_tuple, exponent = Decimal(repr(value)).as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    stripped = digits.rstrip("0")
    exponent += len(digits) - len(stripped)
    digits = stripped
    nd = len(digits)
    dp = nd + exponent
    neg = "-" if sign else ""

    exp10 = dp - 1
    if exp10 < -4 or exp10 >= 6:
        mantissa = digits[0] + ("." + digits[1:] if nd > 1 else "")
        exp_sign = "-" if exp10 < 0 else "+"
        return f"{neg}{mantissa}e{exp_sign}{abs(exp10):02d}"

    if dp <= 0:
        return f"{neg}0." + "0" * (-dp) + digits
    if dp >= nd:
        return neg + digits + "0" * (dp - nd)
    return f"{neg}{digits[:dp]}.{digits[dp:]}"


def stringify(message) -> str:
    """Render message for debugging; never raises for supported shapes."""
    buf = io.StringIO()
    _write(buf, message)
    return buf.getvalue()


def _write(w: io.StringIO, v) -> None:
    if v is None:
        w.write("<nil>")
    elif isinstance(v, Timestamp):
        w.write(f"{TYPE_PREFIX}.Timestamp{{{v}}}")
    elif isinstance(v, Enum):
        _write(w, v.value)
    elif isinstance(v, bool):
        w.write("true" if v else "false")
    elif isinstance(v, int):
        w.write(str(v))
    elif isinstance(v, float):
        w.write(format_float(v))
    elif isinstance(v, str):
        w.write('"')
        w.write(v)
        w.write('"')
    elif isinstance(v, (list, tuple)):
        w.write("[")
        for i, item in enumerate(v):
            if i > 0:
                w.write(" ")
            _write(w, item)
        w.write("]")
    elif isinstance(v, dict):
        w.write("map[")
        for i, key in enumerate(sorted(v, key=str)):
            if i > 0:
                w.write(" ")
            w.write(f"{key}:")
            _write(w, v[key])
        w.write("]")
    elif isinstance(v, BaseModel) or (dataclasses.is_dataclass(v) and not isinstance(v, type)):
        _write_record(w, v)
    else:
        w.write(str(v))


def _write_record(w: io.StringIO, v) -> None:
    prefix = getattr(type(v), "_type_prefix", None)
    if prefix:
        w.write(f"{prefix}.{type(v).__name__}")
    w.write("{")
    sep = False
    for name, label in _record_fields(v):
        value = getattr(v, name)
        # absent scalars and absent lists are both None
        if value is None:
            continue
        if sep:
            w.write(", ")
        w.write(label or field_label(name))
        w.write(":")
        _write(w, value)
        sep = True
    w.write("}")


def _record_fields(v):
    if isinstance(v, BaseModel):
        for name, f in type(v).model_fields.items():
            extra = f.json_schema_extra if isinstance(f.json_schema_extra, dict) else {}
            yield name, extra.get("label")
        return
    for f in dataclasses.fields(v):
        if not f.name.startswith("_"):
            yield f.name, f.metadata.get("label")
