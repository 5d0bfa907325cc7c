# =============================================================================
# core/models.py  —  Data Models & Tool Catalog
# =============================================================================
#
# These dataclasses describe the *shape* of every tool the server exposes:
# its name, what it does, and which parameters it accepts.  They carry no
# behavior beyond a couple of lookup helpers.
#
# THE CATALOG:
#   TOOL_CATALOG is the single declarative table of tools.  The tools/ layer
#   reads names and descriptions from here when it registers handlers with
#   FastMCP, and the tests compare the published JSON schemas against it.
#   Adding a tool means adding an entry here first.
#
# ENUMERATED VALUES:
#   Language and TimeFormat are Literal types.  FastMCP turns a Literal
#   annotation into an "enum" in the JSON schema, so the allowed values
#   below are the ones the host is told about and validated against.
# =============================================================================

from dataclasses import dataclass, field
from typing import Literal, get_args


Language = Literal["japanese", "english"]
TimeFormat = Literal["default", "rfc3339", "unix"]

LANGUAGES: tuple[str, ...] = get_args(Language)
TIME_FORMATS: tuple[str, ...] = get_args(TimeFormat)

DEFAULT_LANGUAGE: Language = "japanese"
DEFAULT_TIME_FORMAT: TimeFormat = "default"


# -----------------------------------------------------------------------------
# ParamSpec — one input parameter of a tool
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class ParamSpec:
    """A single declared tool parameter."""

    name: str
    description: str
    required: bool = False
    allowed_values: tuple[str, ...] | None = None   # None = free-form string
    default: str | None = None


# -----------------------------------------------------------------------------
# ToolDescriptor — one entry of the catalog
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class ToolDescriptor:
    """A named, schema-described operation exposed to the host.

    `key` is the stable logical identifier used inside the code base
    ("greeting", "clock").  `name` is the base tool name published over MCP;
    the server may prepend a configured prefix to it.
    """

    key: str
    name: str
    description: str
    params: tuple[ParamSpec, ...] = field(default_factory=tuple)

    def param(self, name: str) -> ParamSpec:
        for spec in self.params:
            if spec.name == name:
                return spec
        raise KeyError(f"Tool '{self.name}' has no parameter '{name}'")

    def required_params(self) -> list[str]:
        return [spec.name for spec in self.params if spec.required]


GREETING_TOOL = ToolDescriptor(
    key="greeting",
    name="say_hello",
    description="Return a greeting for the given name (Japanese by default).",
    params=(
        ParamSpec(
            name="name",
            description="Name of the person to greet",
            required=True,
        ),
        ParamSpec(
            name="language",
            description="Language of the greeting (japanese, english)",
            allowed_values=LANGUAGES,
            default=DEFAULT_LANGUAGE,
        ),
    ),
)

CLOCK_TOOL = ToolDescriptor(
    key="clock",
    name="get_time",
    description="Return the current time.",
    params=(
        ParamSpec(
            name="format",
            description="Time format (default, rfc3339, unix)",
            allowed_values=TIME_FORMATS,
            default=DEFAULT_TIME_FORMAT,
        ),
    ),
)

# Built once at import; never mutated.
TOOL_CATALOG: dict[str, ToolDescriptor] = {
    GREETING_TOOL.key: GREETING_TOOL,
    CLOCK_TOOL.key: CLOCK_TOOL,
}


def get_descriptor(key: str) -> ToolDescriptor:
    """Look up a catalog entry by its logical key.

    Raises:
        KeyError: if no tool is registered under `key`.
    """
    try:
        return TOOL_CATALOG[key]
    except KeyError:
        raise KeyError(
            f"Unknown tool key '{key}'. Available: {sorted(TOOL_CATALOG)}"
        ) from None


def tool_name(descriptor: ToolDescriptor, prefix: str = "") -> str:
    """The name a tool is published under, e.g. "go_" + "say_hello"."""
    return f"{prefix}{descriptor.name}"
