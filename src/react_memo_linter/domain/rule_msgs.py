"""Pure message-building from a registry dict. No I/O or infrastructure imports."""

from collections.abc import Mapping
from typing import Optional, cast

from react_memo_linter.domain.constants import REGISTRY_PREFIX
from react_memo_linter.domain.registry_types import RuleRegistryEntry


class RuleMsgBuilder:
    """Builds rule message maps from a registry mapping."""

    @staticmethod
    def get_entry(
        registry: Mapping[str, RuleRegistryEntry], rule_id: str
    ) -> Optional[RuleRegistryEntry]:
        """Return registry entry for a rule by registry key or by its rule_id field."""
        entry = registry.get(f"{REGISTRY_PREFIX}{rule_id}")
        if isinstance(entry, dict):
            return cast(RuleRegistryEntry, dict(entry))
        for key, e in registry.items():
            if not key.startswith(REGISTRY_PREFIX):
                continue
            if isinstance(e, dict) and e.get("rule_id") == rule_id:
                return cast(RuleRegistryEntry, dict(e))
        return None

    @staticmethod
    def build_messages(
        registry: Mapping[str, RuleRegistryEntry],
        rule_id: str,
        defaults: Mapping[str, str],
    ) -> dict[str, str]:
        """
        Return {message_id: template} for a rule.

        Registry templates override `defaults`; message ids the registry does
        not mention keep their default text, so a rule never loses a message.
        """
        messages = dict(defaults)
        entry = RuleMsgBuilder.get_entry(registry, rule_id)
        if not entry:
            return messages
        for item in entry.get("messages", []) or []:
            if not isinstance(item, dict):
                continue
            message_id = item.get("message_id")
            template = item.get("message_template")
            if message_id and template:
                messages[str(message_id)] = str(template)
        return messages

    @staticmethod
    def describe(
        registry: Mapping[str, RuleRegistryEntry], rule_id: str, default: str
    ) -> str:
        entry = RuleMsgBuilder.get_entry(registry, rule_id)
        if entry and entry.get("short_description"):
            return str(entry["short_description"])
        return default
