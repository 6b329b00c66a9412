"""
Composite date/time inputs.

A date, time or datetime attribute is rendered as several positional
sub-fields with ids ending in ``_1i`` .. ``_6i`` (year, month, day, hour,
minute, second). Dates use selects for positions 1-3; times carry the date
portion in hidden fields 1-3 and use selects for 4-5 (and 6 with seconds);
datetimes use selects throughout.
"""

from dataclasses import dataclass
from datetime import date, datetime, time
import logging
from typing import Any, List, Optional

from dateutil import parser as date_parser

from ..nodes import Fragment, Node, Text
from ..registry import ResolvedType, register_input
from .base import Input

logger = logging.getLogger(__name__)

DATE_PARTS = ((1, 'year'), (2, 'month'), (3, 'day'))
TIME_PARTS = ((4, 'hour'), (5, 'minute'), (6, 'second'))

MONTH_NAMES = [
    'January', 'February', 'March', 'April', 'May', 'June', 'July',
    'August', 'September', 'October', 'November', 'December'
]

PROMPT_DEFAULTS = {
    'year': 'Year',
    'month': 'Month',
    'day': 'Day',
    'hour': 'Hour',
    'minute': 'Minute',
    'second': 'Second',
}

YEAR_SPAN = 5
TIME_SEPARATOR = ' : '


@dataclass(frozen=True)
class CompositeField:
    """One positional sub-field of a composite input."""

    position: int
    kind: str
    id_suffix: str
    node: Node

    @property
    def is_select(self) -> bool:
        return self.node.tag == 'select'

    @property
    def is_hidden(self) -> bool:
        return self.node.tag == 'input' and self.node.attributes.get('type') == 'hidden'


def parse_moment(value: Any, today: date) -> Optional[datetime]:
    """
    Convert an attribute value to a datetime.

    Strings are parsed with dateutil; a bare time is placed on ``today``.
    Unparseable values yield None.
    """
    if value is None or value == '':
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time())
    if isinstance(value, time):
        return datetime.combine(today, value)
    if isinstance(value, str):
        try:
            return date_parser.parse(value, default=datetime.combine(today, time()))
        except (ValueError, OverflowError) as e:
            logger.warning(f"Failed to parse date/time string '{value}': {e}")
            return None
    logger.warning(f"Unexpected date/time value type: {type(value)}")
    return None


@register_input(ResolvedType.DATE, ResolvedType.DATETIME, ResolvedType.TIME)
class DateTimeInput(Input):
    """Multi-part date/time control."""

    def __init__(self, builder, request, resolution):
        super().__init__(builder, request, resolution)
        self.minute_step = self._validated_minute_step()

    def _validated_minute_step(self) -> int:
        """
        Read the ``minute_step`` option.

        Raises:
            ValueError: If the step is not an integer between 1 and 59
        """
        raw = self.options.get('minute_step')
        if raw is None:
            return 1
        try:
            step = int(raw)
        except (TypeError, ValueError):
            step = None
        if step is None or isinstance(raw, bool) or not 1 <= step <= 59:
            logger.error(f"Invalid minute_step {raw!r} for '{self.attribute}'")
            raise ValueError(f"minute_step must be an integer between 1 and 59, got {raw!r}")
        return step

    @property
    def has_date_selects(self) -> bool:
        return self.input_type in (ResolvedType.DATE, ResolvedType.DATETIME)

    @property
    def discards_date_selects(self) -> bool:
        return self.input_type is ResolvedType.TIME or bool(self.options.get('discard_selects'))

    def time_parts(self):
        if self.input_type is ResolvedType.DATE:
            return ()
        parts = TIME_PARTS if self.options.get('include_seconds') else TIME_PARTS[:2]
        return parts

    def label_target(self) -> str:
        if self.has_date_selects:
            return self.naming.position_id(1)
        return self.naming.position_id(TIME_PARTS[0][0])

    def moment(self) -> Optional[datetime]:
        return parse_moment(self.value, self.builder.now().date())

    def selection_moment(self) -> Optional[datetime]:
        """The moment whose parts are pre-selected; None leaves selects blank."""
        moment = self.moment()
        if moment is not None:
            return moment
        if self.options.get('prompt') or self.options.get('include_blank'):
            return None
        return self.builder.now()

    def prompt_for(self, kind: str) -> Optional[str]:
        prompt = self.options.get('prompt')
        if prompt is None or prompt is False:
            return None
        if isinstance(prompt, dict):
            text = prompt.get(kind)
            return None if text is None else str(text)
        if prompt is True:
            return self.translate_key(f"datetime.prompts.{kind}", PROMPT_DEFAULTS[kind])
        return str(prompt)

    def _choices(self, kind: str, center: datetime):
        """(value, label) pairs for a sub-select."""
        if kind == 'year':
            start = int(self.options.get('start_year', center.year - YEAR_SPAN))
            end = int(self.options.get('end_year', center.year + YEAR_SPAN))
            step = 1 if end >= start else -1
            return [(str(y), str(y)) for y in range(start, end + step, step)]
        if kind == 'month':
            names = self.options.get('month_names') or MONTH_NAMES
            if self.options.get('use_month_numbers'):
                return [(str(m), str(m)) for m in range(1, 13)]
            return [(str(m), str(names[m - 1])) for m in range(1, 13)]
        if kind == 'day':
            return [(str(d), str(d)) for d in range(1, 32)]
        if kind == 'hour':
            return [(f"{h:02d}", f"{h:02d}") for h in range(24)]
        step = self.minute_step if kind == 'minute' else 1
        return [(f"{m:02d}", f"{m:02d}") for m in range(0, 60, step)]

    @staticmethod
    def _part_value(kind: str, moment: datetime) -> str:
        number = getattr(moment, kind)
        if kind in ('hour', 'minute', 'second'):
            return f"{number:02d}"
        return str(number)

    def _selected_value(self, kind: str, moment: Optional[datetime]) -> Optional[str]:
        if moment is None:
            return None
        if kind == 'minute':
            step = self.minute_step
            return f"{moment.minute - moment.minute % step:02d}"
        return self._part_value(kind, moment)

    def build_select(self, position: int, kind: str, moment: Optional[datetime]) -> Node:
        attrs = self.base_attributes()
        attrs['id'] = self.naming.position_id(position)
        attrs['name'] = self.naming.position_name(position)
        select = Node('select', attrs)

        prompt = self.prompt_for(kind)
        if prompt is not None:
            select.append(Node('option', {'value': ''}, [Text(prompt)]))
        elif self.options.get('include_blank'):
            select.append(Node('option', {'value': ''}, [Text('')]))

        selected = self._selected_value(kind, moment)
        center = moment or self.builder.now()
        for value, label in self._choices(kind, center):
            select.append(Node('option', {'value': value, 'selected': value == selected}, [Text(label)]))

        return self.finish(select)

    def build_hidden(self, position: int, kind: str, moment: datetime) -> Node:
        return Node('input', {
            'type': 'hidden',
            'id': self.naming.position_id(position),
            'name': self.naming.position_name(position),
            'value': self._part_value(kind, moment),
        })

    def composite_fields(self) -> List[CompositeField]:
        """Build the positional sub-fields in position order."""
        moment = self.selection_moment()
        fallback = self.moment() or self.builder.now()
        fields = []

        for position, kind in DATE_PARTS:
            if self.discards_date_selects:
                node = self.build_hidden(position, kind, fallback)
            else:
                node = self.build_select(position, kind, moment)
            fields.append(CompositeField(position, kind, f"_{position}i", node))

        for position, kind in self.time_parts():
            node = self.build_select(position, kind, moment)
            fields.append(CompositeField(position, kind, f"_{position}i", node))

        logger.debug(f"Built composite fields {[f.position for f in fields]} for '{self.attribute}'")
        return fields

    def render(self) -> Node:
        fragment = Fragment()
        previous: Optional[CompositeField] = None
        for field in self.composite_fields():
            if previous is not None and previous.position >= 4 and field.position >= 5:
                fragment.append(Text(TIME_SEPARATOR))
            fragment.append(field.node)
            previous = field
        return fragment
