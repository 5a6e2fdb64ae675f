"""Like/dislike resolution between companies and developers.

A decision is recorded against a scope: the company/developer pair, narrowed
to a job recruitment when a developer acts on a posting. The first decision in
a scope opens a row, the counterpart's decision closes it, and anything after
that is rejected.
"""
import asyncio
import weakref
from contextlib import asynccontextmanager
from dataclasses import asdict, dataclass
from enum import Enum
from typing import AsyncIterator, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from tindev.core.exceptions import AlreadyInteractedError, NotFoundError, RoleDeniedError
from tindev.core.logging import get_logger
from tindev.models.enums import Role, TargetKind
from tindev.models.matching import Matching
from tindev.repositories.matching import MatchingRepository, Scope
from tindev.repositories.profile import (
    CompanyRepository,
    DeveloperRepository,
    JobRecruitmentRepository,
)

logger = get_logger(__name__)


class DecisionOutcome(str, Enum):
    """Result of recording one side's decision."""

    LIKED = "Liked"
    MATCHED = "Matched"
    DISLIKED = "Disliked"
    WATCH_AGAIN = "Watch again"

    @property
    def message(self) -> str:
        return f"{self.value}!!!"


def resolve_outcome(other: Optional[bool], mine: bool) -> DecisionOutcome:
    """Name the outcome of a decision given the counterpart's standing decision.

    Args:
        other: Counterpart's decision, None when the row is new
        mine: Decision being recorded

    Returns:
        The outcome shown to the caller
    """
    if other:
        return DecisionOutcome.MATCHED if mine else DecisionOutcome.WATCH_AGAIN
    return DecisionOutcome.LIKED if mine else DecisionOutcome.DISLIKED


@dataclass(frozen=True)
class Decision:
    outcome: DecisionOutcome
    matching: Matching


class ScopeLocks:
    """Per-pair asyncio locks.

    Locks are held weakly, so a pair's lock disappears once nobody waits on it.
    """

    def __init__(self) -> None:
        self._locks: "weakref.WeakValueDictionary[tuple[str, str], asyncio.Lock]" = (
            weakref.WeakValueDictionary()
        )

    def get(self, key: tuple[str, str]) -> asyncio.Lock:
        lock = self._locks.get(key)
        if lock is None:
            lock = asyncio.Lock()
            self._locks[key] = lock
        return lock

    @asynccontextmanager
    async def hold(self, key: tuple[str, str]) -> AsyncIterator[None]:
        lock = self.get(key)
        async with lock:
            yield

    def __len__(self) -> int:
        return len(self._locks)


class MatchingEngine:
    """Record likes and dislikes and resolve them into matches."""

    def __init__(self, session: AsyncSession, locks: ScopeLocks) -> None:
        """Initialize engine.

        Args:
            session: Database session; the engine commits it
            locks: Lock registry shared by every engine of the worker
        """
        self.session = session
        self.locks = locks
        self.matchings = MatchingRepository(session)
        self.developers = DeveloperRepository(session)
        self.companies = CompanyRepository(session)
        self.jobs = JobRecruitmentRepository(session)

    async def record_decision(
        self,
        acting_role: Role,
        acting_user_id: str,
        target_kind: TargetKind,
        target_id: str,
        liked: bool,
    ) -> Decision:
        """Record a like or dislike and return its outcome.

        Args:
            acting_role: Role of the caller
            acting_user_id: User id of the caller
            target_kind: Whether a developer or a job recruitment is targeted
            target_id: Developer profile id or job recruitment id
            liked: True for a like, False for a dislike

        Returns:
            The outcome and the row it was recorded on

        Raises:
            RoleDeniedError: If the caller's role cannot act on this target kind
            NotFoundError: If the target or either profile does not exist
            AlreadyInteractedError: If the scope is closed or the caller already decided
        """
        acting_role = Role(acting_role)
        if acting_role is not target_kind.initiator:
            raise RoleDeniedError(acting_role.value, target_kind.initiator.value)

        scope = await self._resolve_scope(acting_user_id, target_kind, target_id)

        async with self.locks.hold(scope.pair):
            try:
                decision = await self._apply(scope, acting_role, target_kind, liked)
                await self.session.commit()
            except IntegrityError as e:
                # Another process opened the same scope first
                await self.session.rollback()
                raise AlreadyInteractedError(
                    target_kind.value,
                    context={"scope": asdict(scope)},
                    original_error=e,
                ) from e
            except Exception:
                await self.session.rollback()
                raise

        logger.info(
            "Decision recorded",
            role=acting_role.value,
            company_user_id=scope.company_user_id,
            developer_user_id=scope.developer_user_id,
            job_recruitment_id=decision.matching.job_recruitment_id,
            liked=liked,
            outcome=decision.outcome.value,
            matching_id=decision.matching.id,
        )
        return decision

    async def _resolve_scope(
        self, acting_user_id: str, target_kind: TargetKind, target_id: str
    ) -> Scope:
        if target_kind is TargetKind.DEVELOPER:
            company = await self.companies.get_by_user_id(acting_user_id)
            if company is None:
                raise NotFoundError("company", acting_user_id)
            developer = await self.developers.get(target_id)
            if developer is None:
                raise NotFoundError("developer", target_id)
            return Scope(company.user_id, developer.user_id)

        developer = await self.developers.get_by_user_id(acting_user_id)
        if developer is None:
            raise NotFoundError("developer", acting_user_id)
        job = await self.jobs.get(target_id)
        if job is None:
            raise NotFoundError("job recruitment", target_id)
        company = await self.companies.get_by_user_id(job.user_id)
        if company is None:
            raise NotFoundError("company", job.user_id)
        return Scope(company.user_id, developer.user_id, job.id)

    async def _apply(
        self, scope: Scope, role: Role, target_kind: TargetKind, liked: bool
    ) -> Decision:
        matching = await self.matchings.get_for_scope(scope, for_update=True)
        if matching is None and role is Role.DEVELOPER:
            matching = await self.matchings.get_for_scope(scope.profile_level(), for_update=True)

        if matching is None:
            matching = await self.matchings.create_decision(scope, role, liked)
            return Decision(resolve_outcome(None, liked), matching)

        other = matching.decision_of(role.counterpart)
        if other is None or matching.decision_of(role) is not None:
            raise AlreadyInteractedError(
                target_kind.value,
                context={"matching_id": matching.id, "role": role.value},
            )

        matching.set_decision(role, liked)
        if role is Role.DEVELOPER and matching.job_recruitment_id is None:
            # A profile-level row is claimed by the first posting the developer answers
            matching.job_recruitment_id = scope.job_recruitment_id
        await self.session.flush()
        return Decision(resolve_outcome(other, liked), matching)
