"""Path template rendering for endpoint URLs."""

import re
from collections.abc import Mapping

from twilio_api.exceptions import TwilioValidationError

PLACEHOLDER_PATTERN = re.compile(r"\{([A-Za-z][A-Za-z0-9]*)\}")


def placeholders(template: str) -> tuple[str, ...]:
    """Return the placeholder names of a template in order of appearance."""
    return tuple(PLACEHOLDER_PATTERN.findall(template))


def render_path(template: str, values: Mapping[str, str] | None = None) -> str:
    """Substitute `{Name}` placeholders in a path template.

    Values are inserted literally, without escaping, in the order they are
    given. Callers must pass already-valid path segments.

    Args:
        template: Path template such as "/2010-04-01/Accounts/{Sid}.json".
        values: Mapping of placeholder name to replacement value.

    Returns:
        The rendered path.

    Raises:
        TwilioValidationError: If a value is given for a name the template
            does not contain, or a placeholder is left unfilled.
    """
    values = values or {}
    expected = placeholders(template)

    unknown = [name for name in values if name not in expected]
    if unknown:
        raise TwilioValidationError(
            f"Unknown path parameter(s) {', '.join(unknown)} for {template}"
        )

    path = template
    for name, value in values.items():
        path = path.replace("{" + name + "}", value)

    missing = PLACEHOLDER_PATTERN.findall(path)
    if missing:
        raise TwilioValidationError(
            f"Missing path parameter(s) {', '.join(missing)} for {template}"
        )
    return path
