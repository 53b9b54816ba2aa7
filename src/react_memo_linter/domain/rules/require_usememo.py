"""require-usememo: calls, object-like literals and markup built inside hooks and components must be memoized."""

from collections.abc import Mapping
from typing import Optional

from react_memo_linter.domain.config import ConfigurationLoader
from react_memo_linter.domain.constants import MEMO_HELPER
from react_memo_linter.domain.eligibility import EligibilityPolicy
from react_memo_linter.domain.entities import RuleKind
from react_memo_linter.domain.import_resolver import ImportResolver
from react_memo_linter.domain.registry_types import RuleRegistryEntry
from react_memo_linter.domain.rule_msgs import RuleMsgBuilder
from react_memo_linter.domain.rules import MemoRule, RuleMeta

RULE_ID: str = "require-usememo"

DEFAULT_MESSAGES: dict[str, str] = {
    MEMO_HELPER: "Wrap this value with useMemo inside custom hooks and components.",
}

DEFAULT_DESCRIPTION: str = (
    "Enforce wrapping function calls and object-type values with useMemo inside custom hooks and components."
)


class RequireUseMemoRule(MemoRule):
    """
    Reports calls, object and array literals and markup bound in a hook or component body.

    Calls to hooks and to diagnostic sinks such as `console.log` are left alone,
    since they are either illegal inside a factory or run for their side effect.

    const cfg = { a: 1 }  ->  const cfg = useMemo(() => ({ a: 1 }), [])
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
            kind=RuleKind.WRAP_AS_VALUE,
            helper=MEMO_HELPER,
            policy=policy or EligibilityPolicy(),
            resolver=resolver or ImportResolver(),
        )

    @classmethod
    def from_config(
        cls,
        config: ConfigurationLoader,
        registry: Optional[Mapping[str, RuleRegistryEntry]] = None,
    ) -> "RequireUseMemoRule":
        return cls(
            policy=EligibilityPolicy.from_config(config),
            resolver=ImportResolver(module=config.hook_module),
            registry=registry,
        )
