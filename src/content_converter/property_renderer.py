"""Display strings for database entry properties."""

from src.models import Property, spans_from_api
from .rich_text_renderer import rich_text_to_markdown


def property_to_text(prop: Property) -> str:
    """Convert a property value to a display string.

    An empty result means the property should be left out of the listing.
    Unknown property kinds render as ``[<kind> property]``.
    """
    kind = prop.kind
    value = prop.value

    if kind in ('title', 'rich_text'):
        return rich_text_to_markdown(spans_from_api(value))
    if kind == 'number':
        return str(value) if value is not None else ''
    if kind in ('select', 'status'):
        return value.get('name', '') if value else ''
    if kind == 'multi_select':
        return ', '.join(option.get('name', '') for option in value or [])
    if kind == 'date':
        if not value:
            return ''
        date_str = value.get('start') or ''
        if value.get('end'):
            date_str += f" to {value['end']}"
        return date_str
    if kind == 'checkbox':
        return 'Yes' if value else 'No'
    if kind in ('url', 'email', 'phone_number'):
        return value or ''
    if kind in ('created_time', 'last_edited_time'):
        return value or ''

    return f"[{kind} property]"
