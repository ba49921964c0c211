"""Template settings — configurable wording and date formats.

Overrides come from the domain configuration's ``custom.notification_templates``
table, e.g. in ``pyproject.toml``::

    [tool.protean.custom.notification_templates]
    datetime_format = "%d %B %Y, %H:%M"

    [tool.protean.custom.notification_templates.reminder]
    subject = "See you at {time}"

Purposes without an override keep the wording defined on their template.
"""

from dataclasses import dataclass, field
from datetime import datetime

from protean.utils.globals import current_domain

DEFAULT_DATETIME_FORMAT = "%A, %B %d, %Y at %I:%M %p"
DEFAULT_TIME_FORMAT = "%I:%M %p"


def fill_placeholders(template: str, values: dict[str, str]) -> str:
    """Replace each ``{name}`` token with its value. Unknown tokens are left as they are."""
    result = template
    for name, value in values.items():
        result = result.replace("{" + name + "}", value)
    return result


@dataclass(frozen=True)
class TemplateSettings:
    datetime_format: str = DEFAULT_DATETIME_FORMAT
    time_format: str = DEFAULT_TIME_FORMAT
    overrides: dict[str, dict[str, str]] = field(default_factory=dict)

    @classmethod
    def from_config(cls, config) -> "TemplateSettings":
        """Build settings from a Protean config mapping (or any dict)."""
        table = config.get("notification_templates") or (config.get("custom") or {}).get("notification_templates") or {}

        overrides = {
            purpose: {key: value for key, value in texts.items() if key in ("subject", "body")}
            for purpose, texts in table.items()
            if isinstance(texts, dict)
        }
        return cls(
            datetime_format=table.get("datetime_format", DEFAULT_DATETIME_FORMAT),
            time_format=table.get("time_format", DEFAULT_TIME_FORMAT),
            overrides=overrides,
        )

    def texts_for(self, purpose: str, subject: str, body: str) -> tuple[str, str]:
        """Return the (subject, body) pair for ``purpose``, with any override applied."""
        override = self.overrides.get(purpose, {})
        return override.get("subject", subject), override.get("body", body)

    def format_datetime(self, value: datetime) -> str:
        return value.strftime(self.datetime_format)

    def format_time(self, value: datetime) -> str:
        return value.strftime(self.time_format)


def current_template_settings() -> TemplateSettings:
    """Settings of the active domain."""
    return TemplateSettings.from_config(current_domain.config)
