"""require-usecallback: functions created inside hooks and components must be memoized."""

from collections.abc import Mapping
from typing import Optional

from react_memo_linter.domain.config import ConfigurationLoader
from react_memo_linter.domain.constants import CALLBACK_HELPER
from react_memo_linter.domain.eligibility import EligibilityPolicy
from react_memo_linter.domain.entities import RuleKind
from react_memo_linter.domain.import_resolver import ImportResolver
from react_memo_linter.domain.registry_types import RuleRegistryEntry
from react_memo_linter.domain.rule_msgs import RuleMsgBuilder
from react_memo_linter.domain.rules import MemoRule, RuleMeta

RULE_ID: str = "require-usecallback"

DEFAULT_MESSAGES: dict[str, str] = {
    CALLBACK_HELPER: "Wrap this function with useCallback inside custom hooks and components.",
}

DEFAULT_DESCRIPTION: str = (
    "Enforce wrapping functions with useCallback inside custom hooks and components."
)


class RequireUseCallbackRule(MemoRule):
    """
    Reports function and arrow literals bound directly in a hook or component body.

    const handler = () => {...}  ->  const handler = useCallback(() => {...}, [])
    """

    def __init__(
        self,
        policy: Optional[EligibilityPolicy] = None,
        resolver: Optional[ImportResolver] = None,
        registry: Optional[Mapping[str, RuleRegistryEntry]] = None,
    ) -> None:
        registry = registry or {}
        entry = RuleMsgBuilder.get_entry(registry, RULE_ID) or {}
        super().__init__(
            meta=RuleMeta(
                rule_id=RULE_ID,
                type="problem",
                description=RuleMsgBuilder.describe(registry, RULE_ID, DEFAULT_DESCRIPTION),
                messages=RuleMsgBuilder.build_messages(registry, RULE_ID, DEFAULT_MESSAGES),
                docs_url=str(entry.get("docs_url", "")),
            ),
            kind=RuleKind.WRAP_AS_CALLBACK,
            helper=CALLBACK_HELPER,
            policy=policy or EligibilityPolicy(),
            resolver=resolver or ImportResolver(),
        )

    @classmethod
    def from_config(
        cls,
        config: ConfigurationLoader,
        registry: Optional[Mapping[str, RuleRegistryEntry]] = None,
    ) -> "RequireUseCallbackRule":
        return cls(
            policy=EligibilityPolicy.from_config(config),
            resolver=ImportResolver(module=config.hook_module),
            registry=registry,
        )
