"""
Priority selects for countries and time zones.

Entries matching the priority subset are listed first, followed by a
disabled separator and then the complete base list in its original order
(promoted entries appear twice). When nothing matches, the base list is
rendered alone.
"""

import logging
import re
from typing import Any, List

from ..collection import CollectionEntry, normalize
from ..nodes import Node
from ..priority_data import country_collection, time_zone_collection
from ..registry import ResolvedType, register_input
from .collection_input import CollectionInput

logger = logging.getLogger(__name__)

BASE_COLLECTIONS = {
    ResolvedType.COUNTRY: country_collection,
    ResolvedType.TIME_ZONE: time_zone_collection,
}


def _priority_matches(entry: CollectionEntry, priority: Any) -> bool:
    if isinstance(priority, re.Pattern):
        return priority.search(entry.param) is not None
    return entry.param in {str(value) for value in priority}


def prioritize(entries: List[CollectionEntry], priority: Any) -> List[CollectionEntry]:
    """
    Collect the entries matching a priority list or pattern.

    A list keeps its own order; a pattern keeps the base list order.
    """
    if isinstance(priority, re.Pattern):
        return [entry for entry in entries if _priority_matches(entry, priority)]
    by_param = {}
    for entry in entries:
        by_param.setdefault(entry.param, entry)
    return [by_param[str(value)] for value in priority if str(value) in by_param]


@register_input(ResolvedType.COUNTRY, ResolvedType.TIME_ZONE)
class PriorityInput(CollectionInput):
    """Country and time zone selects with an optional priority subset."""

    def collection(self):
        if self.options.get('collection') is not None:
            return self.options['collection']
        return BASE_COLLECTIONS[self.input_type]()

    def priority(self):
        """
        The ``priority`` option, else the configured default for this type.

        A string, from either source, is a regular expression; any other
        scalar is a single exact value.
        """
        priority = self.options.get('priority')
        if priority is None:
            priority = self.builder.setting(f"{self.input_type.value}_priority")
        if isinstance(priority, str):
            return re.compile(priority) if priority else None
        if priority is not None and not isinstance(priority, re.Pattern):
            priority = list(priority) if isinstance(priority, (list, tuple, set)) else [priority]
        return priority or None

    def render(self) -> Node:
        entries = self.entries()
        priority = self.priority()

        promoted = prioritize(entries, priority) if priority is not None else []
        if promoted:
            separator = CollectionEntry(
                label=self.builder.setting('collection_separator'),
                value='',
                disabled=True,
            )
            logger.debug(f"Promoted {len(promoted)} entries for '{self.attribute}'")
            entries = promoted + [separator] + entries
        elif priority is not None:
            logger.debug(f"No entries matched the priority for '{self.attribute}'")

        include_blank = bool(self.options.get('include_blank'))
        return self.render_select(entries, include_blank)
