"""Process-wide registry of rule chains, keyed by family.

Chains are assembled during a single-threaded initialization phase and
sealed afterwards. Once sealed, the registry is read-only and may be
shared by concurrent evaluations without locking.
"""

from __future__ import annotations

import hashlib
import json
import logging
from collections.abc import Iterable

from sutrachain.exceptions import RegistrySealedError
from sutrachain.rules.chain import RuleChain
from sutrachain.rules.predicate import RulePredicate

logger = logging.getLogger(__name__)


class RuleRegistry:
    """Ordered rule chains for every family."""

    def __init__(self) -> None:
        self._chains: dict[str, RuleChain] = {}
        self._sealed = False

    @property
    def sealed(self) -> bool:
        return self._sealed

    @property
    def families(self) -> tuple[str, ...]:
        """Families in first-registration order."""
        return tuple(self._chains)

    def register(self, family: str, predicate: RulePredicate) -> RulePredicate:
        """Append *predicate* to the chain for *family* and return it."""
        if self._sealed:
            raise RegistrySealedError(f"Cannot register '{predicate.rule_id}': registry is sealed")
        chain = self._chains.get(family)
        if chain is None:
            chain = RuleChain(family)
        chain.append(predicate)
        self._chains[family] = chain
        logger.debug("Registered rule %s v%d in family %s", predicate.rule_id, predicate.version, family)
        return predicate

    def register_all(self, family: str, predicates: Iterable[RulePredicate]) -> None:
        for predicate in predicates:
            self.register(family, predicate)

    def get_chain(self, family: str) -> tuple[RulePredicate, ...]:
        """Return the family's predicates in registration order; unknown families are empty."""
        chain = self._chains.get(family)
        return chain.predicates if chain is not None else ()

    def chain(self, family: str) -> RuleChain:
        """Return the RuleChain for *family*, or a sealed empty chain."""
        chain = self._chains.get(family)
        if chain is None:
            chain = RuleChain(family)
            chain.seal()
        return chain

    def rule_ids(self, family: str) -> tuple[str, ...]:
        return tuple(predicate.rule_id for predicate in self.get_chain(family))

    def seal(self) -> None:
        """Make every chain read-only for the rest of the process lifetime."""
        for chain in self._chains.values():
            chain.seal()
        self._sealed = True
        logger.debug(
            "Sealed rule registry: %s",
            ", ".join(f"{family}={len(chain)}" for family, chain in self._chains.items()) or "empty",
        )

    def fingerprint(self) -> str:
        """Return a stable hash of chain contents and order."""
        payload = [
            {
                "family": family,
                "rules": [[predicate.rule_id, predicate.version] for predicate in chain],
            }
            for family, chain in sorted(self._chains.items())
        ]
        blob = json.dumps(payload, sort_keys=True, separators=(",", ":")).encode("utf-8")
        return hashlib.sha256(blob).hexdigest()

    def __contains__(self, family: object) -> bool:
        return family in self._chains

    def __len__(self) -> int:
        return sum(len(chain) for chain in self._chains.values())
