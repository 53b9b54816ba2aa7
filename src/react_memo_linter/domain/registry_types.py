from typing import TypedDict


class RuleMessageEntry(TypedDict, total=False):
    message_id: str
    message_template: str


class RuleRegistryEntry(TypedDict, total=False):
    rule_id: str
    display_name: str
    short_description: str
    type: str
    docs_url: str
    fixable: bool
    has_suggestions: bool
    helper: str
    messages: list[RuleMessageEntry]
    manual_instructions: str
