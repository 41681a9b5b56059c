"""Data models for the interactive attachments a settings panel renders."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class ActionOption(BaseModel):
    """One entry of a select control: the label shown and the value posted back."""

    model_config = ConfigDict(frozen=True)

    text: str
    value: str


class ActionIntegration(BaseModel):
    """Where a control posts when the user interacts with it."""

    url: str
    context: dict[str, Any] = Field(default_factory=dict)


class PanelAction(BaseModel):
    """An interactive control attached to a settings panel post.

    Select controls carry `options` and a `default_option`; buttons carry
    their payload in the integration context instead.
    """

    name: str
    integration: ActionIntegration
    type: Literal["select", "button"] = "button"
    options: list[ActionOption] = Field(default_factory=list)
    default_option: str = ""

    @property
    def option_values(self) -> list[str]:
        """Encoded values of all options, in display order."""
        return [o.value for o in self.options]

    @property
    def option_labels(self) -> list[str]:
        """Labels of all options, in display order."""
        return [o.text for o in self.options]


class PanelAttachment(BaseModel):
    """Rendered form of a single setting: heading, summary text and controls."""

    title: str
    text: str
    actions: list[PanelAction] = Field(default_factory=list)

    def to_slack(self) -> dict[str, Any]:
        """Return the Slack-style attachment dict understood by Mattermost.

        Empty options and default options are left out, matching what the
        server omits for buttons.
        """
        actions: list[dict[str, Any]] = []
        for action in self.actions:
            raw = action.model_dump(exclude_defaults=True)
            raw.setdefault("type", action.type)
            actions.append(raw)
        return {"title": self.title, "text": self.text, "actions": actions}
