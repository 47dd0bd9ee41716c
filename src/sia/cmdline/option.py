"""
Command-Line Option Model
=========================

This module defines the value model shared by the option registry and
the argument parser:

- **ValueType**: the kind of value an option accepts, together with the
  rules used to validate and convert raw argument strings
- **OptionDescription**: the registered contract for one accepted option
- **Option**: one parsed option and the raw values that followed it

Value Rules
-----------
| Type    | Accepted text                               | Example      |
|---------|---------------------------------------------|--------------|
| int     | digits 0-9 only, no sign                    | 42           |
| float   | digits and at most one '.'                  | 3.14         |
| string  | anything                                    | main.sia     |
| bool    | exactly "0" or "1"                          | 1            |

Values are kept as the raw strings given on the command line. They are
converted to Python values only when read back through an Option.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Union

# Value count meaning "any number of values, including none"
UNBOUNDED = -1

DIGITS = frozenset("0123456789")

OptionValue = Union[int, float, str, bool]


# =============================================================================
# Value Types
# =============================================================================

class ValueType(Enum):
    """
    Kind of value an option accepts.

    Usage:
        >>> ValueType.INTEGER.accepts("42")
        True
        >>> ValueType.INTEGER.accepts("-5")
        False
        >>> ValueType.FLOAT.convert("3.14")
        3.14
    """
    INTEGER = "int"
    FLOAT = "float"
    STRING = "string"
    BOOL = "bool"

    @property
    def type_name(self) -> str:
        """Short name used in help listings and diagnostics."""
        return self.value

    def accepts(self, text: str) -> bool:
        """Return True if ``text`` is a well-formed value of this type."""
        if self is ValueType.INTEGER:
            return bool(text) and all(c in DIGITS for c in text)
        if self is ValueType.FLOAT:
            # "." alone has no digits and is rejected
            return (
                any(c in DIGITS for c in text)
                and all(c in DIGITS or c == "." for c in text)
                and text.count(".") <= 1
            )
        if self is ValueType.BOOL:
            return text in ("0", "1")
        return True

    def convert(self, text: str) -> OptionValue:
        """
        Convert a raw value string to its Python value.

        The text is expected to have passed accepts(). Bool follows the
        command-line convention that "0" is false and anything else true.
        """
        if self is ValueType.INTEGER:
            return int(text)
        if self is ValueType.FLOAT:
            return float(text)
        if self is ValueType.BOOL:
            return text != "0"
        return text


# =============================================================================
# Option Description
# =============================================================================

@dataclass(frozen=True)
class OptionDescription:
    """
    Describes an option accepted by the argument parser.

    Attributes:
        name: Option name, given on the command line as --name
        help_string: Text shown in the help listing
        value_type: Type every value of this option must have
        value_count: Exact number of values, or UNBOUNDED for any number
        short_hand: Single character used as -x; defaults to name[0]

    The parser does not check short hands for collisions. When two
    descriptions share one, the first registered description wins.
    """
    name: str
    help_string: str
    value_type: ValueType = ValueType.STRING
    value_count: int = UNBOUNDED
    short_hand: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("option name must not be empty")
        if self.short_hand is None:
            # Frozen dataclass: bypass __setattr__ to fill the derived field
            object.__setattr__(self, "short_hand", self.name[0])
        elif len(self.short_hand) != 1:
            raise ValueError(
                f"short hand for '{self.name}' must be a single character, "
                f"got '{self.short_hand}'"
            )
        if self.value_count < UNBOUNDED:
            raise ValueError(f"invalid value count {self.value_count} for '{self.name}'")

    @property
    def is_unbounded(self) -> bool:
        return self.value_count == UNBOUNDED

    def takes_values(self, count: int) -> bool:
        """Return True if ``count`` values satisfy this description."""
        return self.is_unbounded or count == self.value_count


# =============================================================================
# Parsed Option
# =============================================================================

@dataclass
class Option:
    """
    A parsed option with the values that followed it.

    Values are stored as raw strings in the order they were given. Each
    Option keeps its own read cursor for get_next_value(); reading one
    option never moves the cursor of another.

    Attributes:
        name: Name of the matching description, or None if the option
              could not be resolved (unknown short hand, stray values)
        values: Raw value strings in command-line order
        flag: The raw token that opened this option, e.g. "-s" or "--source"
    """
    name: Optional[str] = None
    values: List[str] = field(default_factory=list)
    flag: Optional[str] = None
    _next_index: int = field(default=0, init=False, repr=False, compare=False)

    @property
    def has_values(self) -> bool:
        return len(self.values) > 0

    def get_value(
        self, index: int, value_type: ValueType = ValueType.STRING
    ) -> Optional[OptionValue]:
        """
        Get the value at ``index`` converted to ``value_type``.

        Returns:
            The converted value, or None if there is no value at ``index``
        """
        if 0 <= index < len(self.values):
            return value_type.convert(self.values[index])
        return None

    def get_next_value(
        self, value_type: ValueType = ValueType.STRING
    ) -> Optional[OptionValue]:
        """
        Get the next unread value converted to ``value_type``.

        Returns:
            The converted value, or None once every value has been read
        """
        value = self.get_value(self._next_index, value_type)
        if value is not None:
            self._next_index += 1
        return value

    def rewind(self) -> None:
        """Restart sequential reads from the first value."""
        self._next_index = 0
