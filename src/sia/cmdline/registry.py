"""
Option Registry
===============

Holds the option descriptions an invocation of a tool accepts.

Lookup Policy
-------------
Descriptions are kept in registration order and lookups scan that order,
so the first registered description wins:

- Two descriptions with the same name: lookups return the first one.
- Two descriptions with the same short hand: -x resolves to the first one.

Neither case is rejected. Both are logged as warnings when the shadowed
description is registered, since the later description can then only be
reached partially (or not at all).
"""

import logging
from typing import Iterator, List, Optional

from sia.cmdline.option import OptionDescription
from sia.errors import UnregisteredOptionError

logger = logging.getLogger(__name__)


class OptionRegistry:
    """
    Ordered collection of accepted option descriptions.

    Example:
        >>> registry = OptionRegistry()
        >>> registry.add_option(OptionDescription("source", "files to compile"))
        >>> registry.resolve_short_hand("s").name
        'source'
    """

    def __init__(self) -> None:
        self._descriptions: List[OptionDescription] = []

    def __iter__(self) -> Iterator[OptionDescription]:
        return iter(self._descriptions)

    def __len__(self) -> int:
        return len(self._descriptions)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.find(name) is not None

    def add_option(self, description: OptionDescription) -> None:
        """Append a description to the accepted set."""
        existing = self.find(description.name)
        if existing is not None:
            logger.warning(
                f"option '--{description.name}' registered twice, "
                f"the first registration is used"
            )
        else:
            owner = self.resolve_short_hand(description.short_hand)
            if owner is not None:
                logger.warning(
                    f"short hand '-{description.short_hand}' of '--{description.name}' "
                    f"is already used by '--{owner.name}'"
                )
        self._descriptions.append(description)

    def find(self, name: Optional[str]) -> Optional[OptionDescription]:
        """Return the first description named exactly ``name``, or None."""
        if name is None:
            return None
        for description in self._descriptions:
            if description.name == name:
                return description
        return None

    def get_option_description(self, name: Optional[str]) -> OptionDescription:
        """
        Return the first description named exactly ``name``.

        Raises:
            UnregisteredOptionError: if no description has that name. This
                indicates a bug in the caller, not bad user input.
        """
        description = self.find(name)
        if description is None:
            logger.error(
                f"Failed to find queried option ({name}) type. "
                f"OPTION NOT IN OPTION DESCRIPTIONS"
            )
            raise UnregisteredOptionError(name)
        return description

    def resolve_short_hand(self, short_hand: str) -> Optional[OptionDescription]:
        """Return the first description using ``short_hand``, or None."""
        for description in self._descriptions:
            if description.short_hand == short_hand:
                return description
        return None
