"""Options dataclass and replacement-flag parsing for tcommit commands."""

from dataclasses import dataclass, field

DEFAULT_TEMPLATE_FILE = ".tcommit"


def parse_replacements(flags) -> dict[str, str]:
    """Turn ``key=value`` flags into a mapping.

    Raises:
        ValueError: If a flag has no ``=`` or an empty key.
    """
    replacements = {}
    for flag in flags:
        if "=" not in flag:
            raise ValueError(f"invalid replacement format: {flag} (expected key=value)")
        key, value = flag.split("=", 1)
        key = key.strip()
        if not key:
            raise ValueError(f"empty key in replacement: {flag}")
        replacements[key] = value.strip()
    return replacements


@dataclass
class CommitOpts:
    """All options shared by the render and form commands."""

    template_file: str = DEFAULT_TEMPLATE_FILE
    replacements: dict[str, str] = field(default_factory=dict)
    execute: bool = False

    @classmethod
    def from_flags(cls, template_file, replace_flags, execute=False):
        return cls(
            template_file=template_file,
            replacements=parse_replacements(replace_flags),
            execute=execute,
        )
