"""Rule catalog: the rules this package ships and the recommended severities."""

from collections.abc import Mapping
from typing import Optional, Union

from react_memo_linter.domain.config import ConfigurationLoader
from react_memo_linter.domain.constants import SEVERITY_ERROR, SEVERITY_OFF
from react_memo_linter.domain.exceptions import UnknownRuleError
from react_memo_linter.domain.registry_types import RuleRegistryEntry
from react_memo_linter.domain.rules.require_usecallback import RequireUseCallbackRule
from react_memo_linter.domain.rules.require_usememo import RequireUseMemoRule

RuleClass = Union[type[RequireUseCallbackRule], type[RequireUseMemoRule]]
MemoRuleInstance = Union[RequireUseCallbackRule, RequireUseMemoRule]

RULE_CLASSES: dict[str, RuleClass] = {
    "require-usecallback": RequireUseCallbackRule,
    "require-usememo": RequireUseMemoRule,
}

# Both rules on at error, as the recommended preset.
RECOMMENDED: dict[str, str] = {rule_id: SEVERITY_ERROR for rule_id in RULE_CLASSES}


class RuleCatalog:
    """Builds configured rule instances and answers severity lookups."""

    def __init__(
        self,
        config: Optional[ConfigurationLoader] = None,
        registry: Optional[Mapping[str, RuleRegistryEntry]] = None,
    ) -> None:
        self.config = config or ConfigurationLoader()
        self.registry = registry or {}

    @staticmethod
    def rule_ids() -> list[str]:
        return sorted(RULE_CLASSES)

    def create(self, rule_id: str) -> MemoRuleInstance:
        rule_cls = RULE_CLASSES.get(rule_id)
        if rule_cls is None:
            raise UnknownRuleError(rule_id)
        return rule_cls.from_config(self.config, self.registry)

    def severity(self, rule_id: str) -> str:
        if rule_id not in RULE_CLASSES:
            raise UnknownRuleError(rule_id)
        return self.config.rule_severity(rule_id)

    def enabled(self, only: Optional[list[str]] = None) -> list[MemoRuleInstance]:
        """
        Instances of every rule not configured "off".

        `only` restricts the run to the named rules; naming a rule that does
        not exist raises UnknownRuleError.
        """
        selected = list(only) if only else self.rule_ids()
        for rule_id in selected:
            if rule_id not in RULE_CLASSES:
                raise UnknownRuleError(rule_id)
        return [
            self.create(rule_id)
            for rule_id in selected
            if self.severity(rule_id) != SEVERITY_OFF
        ]
