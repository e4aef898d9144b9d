"""
Timeline Intent Layer - Mutation Dispatcher
===========================================
Accept Intent -> Build Candidate -> Validate -> Commit -> Publish.

The Dispatcher is the single writer. It decides ACCEPTED or REJECTED
and is the only caller of EventStore.replace / EventStore.insert.

Flow per intent:
1. Calendar switches (editable / event_resource_editable / selectable)
2. Build a whole candidate Event (never field-by-field patches)
3. Validator checks the candidate against the stored version
4. Commit through the store, or leave the store untouched
5. Publish the snapshot with the outcome, in commit order

Intents are judged and committed one at a time. A rejection never
partially mutates the published state. Publication runs outside the
judging lock, so a subscriber may dispatch the next intent.
"""

from __future__ import annotations

import logging
from collections import deque
from datetime import datetime
from threading import Lock
from typing import Deque, Iterable, Optional

from timeline.config.settings import TimelineSettings
from timeline.events.models import Event
from timeline.events.snapshot import EventSnapshot
from timeline.events.store import EventStore
from timeline.intents.base import Drop, Intent, Resize, Select
from timeline.intents.ids import IdProvider, UuidIdProvider
from timeline.intents.outcomes import IntentOutcome, IntentStatus
from timeline.publishing.publisher import SnapshotPublisher
from timeline.rejection import ReasonCode, RejectionReason
from timeline.resources.registry import ResourceRegistry
from timeline.time.clock import Clock, SystemClock
from timeline.time.instants import parse_instant
from timeline.validation.rules import no_overlap_rule
from timeline.validation.validator import Validator

logger = logging.getLogger("timeline.intents")


class MutationDispatcher:
    """
    Evaluate intents and commit accepted changes.

    Usage:
        dispatcher = MutationDispatcher(
            store=EventStore(initial_events),
            validator=Validator(registry),
            id_provider=UuidIdProvider(),
            publisher=publisher,
        )

        outcome = dispatcher.dispatch(Drop("evt-1", "res-b", start, end))
        # outcome.is_accepted / outcome.reason.code
    """

    def __init__(
        self,
        store: EventStore,
        validator: Validator,
        *,
        id_provider: Optional[IdProvider] = None,
        publisher: Optional[SnapshotPublisher] = None,
        settings: Optional[TimelineSettings] = None,
        clock: Optional[Clock] = None,
    ):
        self._store = store
        self._validator = validator
        self._id_provider = id_provider or UuidIdProvider()
        self._publisher = publisher
        self._settings = settings or TimelineSettings()
        self._clock = clock or SystemClock()
        self._lock = Lock()
        self._queue_lock = Lock()
        self._pending: Deque[IntentOutcome] = deque()
        self._draining = False

    @property
    def store(self) -> EventStore:
        return self._store

    @property
    def settings(self) -> TimelineSettings:
        return self._settings

    # ══════════════════════════════════════════════════════════
    # ENTRY POINT
    # ══════════════════════════════════════════════════════════

    def dispatch(self, intent: Intent) -> IntentOutcome:
        """
        Judge one intent and publish the resulting snapshot.

        Judging and committing happen under the dispatcher lock.
        Publications are delivered afterwards, in commit order, by
        whichever thread is draining the queue. A subscriber that
        dispatches from its callback gets its outcome at once; its
        snapshot is published after the current publication.

        Returns:
            IntentOutcome - never None, never ambiguous.

        Raises:
            TypeError: intent is not Drop, Resize or Select.
        """
        with self._lock:
            outcome = self._judge(intent, self._clock.now_utc())
            if self._publisher is not None:
                with self._queue_lock:
                    self._pending.append(outcome)

        if self._publisher is not None:
            self._drain_publications()

        return outcome

    def _judge(self, intent: Intent, now: datetime) -> IntentOutcome:
        if isinstance(intent, Drop):
            return self._move(
                intent,
                event_id=intent.event_id,
                target_resource_id=intent.target_resource_id,
                new_start=intent.new_start,
                new_end=intent.new_end,
                now=now,
            )
        if isinstance(intent, Resize):
            return self._move(
                intent,
                event_id=intent.event_id,
                target_resource_id=None,
                new_start=intent.new_start,
                new_end=intent.new_end,
                now=now,
            )
        if isinstance(intent, Select):
            return self._create(intent, now=now)
        raise TypeError(
            f"Expected Drop, Resize or Select, "
            f"got {type(intent).__name__}."
        )

    def _drain_publications(self) -> None:
        with self._queue_lock:
            if self._draining:
                return
            self._draining = True

        try:
            while True:
                with self._queue_lock:
                    if not self._pending:
                        self._draining = False
                        return
                    outcome = self._pending.popleft()
                self._publisher.publish(outcome.snapshot, outcome)
        except Exception:
            with self._queue_lock:
                self._draining = False
            raise

    # ── convenience handlers ──────────────────────────────────

    def handle_drop(
        self,
        event_id: str,
        new_resource_id: Optional[str],
        new_start: datetime,
        new_end: datetime,
    ) -> IntentOutcome:
        return self.dispatch(Drop(event_id, new_resource_id, new_start, new_end))

    def handle_resize(
        self,
        event_id: str,
        new_start: datetime,
        new_end: datetime,
    ) -> IntentOutcome:
        return self.dispatch(Resize(event_id, new_start, new_end))

    def handle_create(
        self,
        resource_id: str,
        start,
        end,
        title: Optional[str] = None,
        *,
        editable: bool = True,
        resource_editable: bool = True,
    ) -> IntentOutcome:
        return self.dispatch(Select(
            resource_id=resource_id,
            start_str=start,
            end_str=end,
            title=title,
            editable=editable,
            resource_editable=resource_editable,
        ))

    # ══════════════════════════════════════════════════════════
    # DROP / RESIZE
    # ══════════════════════════════════════════════════════════

    def _move(
        self,
        intent: Intent,
        *,
        event_id: str,
        target_resource_id: Optional[str],
        new_start: datetime,
        new_end: datetime,
        now: datetime,
    ) -> IntentOutcome:
        if not self._settings.editable:
            return self._reject(intent, now, RejectionReason(
                code=ReasonCode.EDITING_DISABLED,
                message="Calendar editing is disabled.",
                rule_name="calendar_settings",
                details={"event_id": event_id},
            ))

        current = self._store.get(event_id)
        if current is None:
            return self._reject(intent, now, RejectionReason(
                code=ReasonCode.NOT_FOUND,
                message=f"Event '{event_id}' not found.",
                rule_name="event_must_exist",
                details={"event_id": event_id},
            ))

        resource_id = target_resource_id or current.resource_id

        if (
            resource_id != current.resource_id
            and not self._settings.event_resource_editable
        ):
            return self._reject(intent, now, RejectionReason(
                code=ReasonCode.RESOURCE_NOT_EDITABLE,
                message="Moving events between resources is disabled.",
                rule_name="calendar_settings",
                details={
                    "event_id": event_id,
                    "resource_id": current.resource_id,
                    "target_resource_id": resource_id,
                },
            ))

        candidate = current.with_changes(
            resource_id=resource_id,
            start=new_start,
            end=new_end,
        )

        validation = self._validator.validate(
            candidate, prior=current, snapshot=self._store.snapshot
        )
        if not validation.is_valid:
            return self._reject(intent, now, validation.reason)

        result = self._store.replace(event_id, lambda _existing: candidate)
        if not result.ok:
            return self._reject(intent, now, result.reason)

        return self._accept(intent, now, result.event)

    # ══════════════════════════════════════════════════════════
    # SELECT (CREATE)
    # ══════════════════════════════════════════════════════════

    def _create(self, intent: Select, *, now: datetime) -> IntentOutcome:
        if not self._settings.selectable:
            return self._reject(intent, now, RejectionReason(
                code=ReasonCode.SELECTION_DISABLED,
                message="Calendar selection is disabled.",
                rule_name="calendar_settings",
                details={"resource_id": intent.resource_id},
            ))

        try:
            start = parse_instant(intent.start_str)
            end = parse_instant(intent.end_str)
        except ValueError as exc:
            return self._reject(intent, now, RejectionReason(
                code=ReasonCode.INVALID_INSTANT,
                message=str(exc),
                rule_name="select_instants",
                details={
                    "start": str(intent.start_str),
                    "end": str(intent.end_str),
                },
            ))

        title = (
            intent.title
            if intent.title is not None
            else self._settings.default_event_title
        )

        attempts = self._settings.id_retry_limit
        for attempt in range(1, attempts + 1):
            event_id = self._id_provider.new_event_id()

            if event_id in self._store.snapshot:
                logger.debug(
                    f"Generated event id '{event_id}' collides "
                    f"(attempt {attempt}/{attempts}); regenerating"
                )
                continue

            candidate = Event(
                id=event_id,
                resource_id=intent.resource_id,
                start=start,
                end=end,
                title=title,
                editable=intent.editable,
                resource_editable=intent.resource_editable,
            )

            validation = self._validator.validate(
                candidate, prior=None, snapshot=self._store.snapshot
            )
            if not validation.is_valid:
                return self._reject(intent, now, validation.reason)

            result = self._store.insert(candidate)
            if result.ok:
                return self._accept(intent, now, result.event)

            if result.reason.code != ReasonCode.DUPLICATE_ID:
                return self._reject(intent, now, result.reason)

        return self._reject(intent, now, RejectionReason(
            code=ReasonCode.DUPLICATE_ID,
            message=(
                f"Could not generate a unique event id "
                f"after {attempts} attempts."
            ),
            rule_name="event_id_generation",
            details={"attempts": attempts},
        ))

    # ══════════════════════════════════════════════════════════
    # OUTCOMES
    # ══════════════════════════════════════════════════════════

    def _accept(
        self, intent: Intent, now: datetime, event: Event
    ) -> IntentOutcome:
        snapshot = self._store.snapshot
        logger.info(
            f"{intent.kind} ACCEPTED for event '{event.id}' "
            f"on resource '{event.resource_id}' "
            f"(version {snapshot.version})"
        )
        return IntentOutcome(
            intent=intent,
            status=IntentStatus.ACCEPTED,
            snapshot=snapshot,
            event=event,
            occurred_at=now,
        )

    def _reject(
        self, intent: Intent, now: datetime, reason: RejectionReason
    ) -> IntentOutcome:
        logger.info(
            f"{intent.kind} rejected by '{reason.rule_name}': "
            f"[{reason.code}] {reason.message}"
        )
        return IntentOutcome(
            intent=intent,
            status=IntentStatus.REJECTED,
            snapshot=self._store.snapshot,
            reason=reason,
            occurred_at=now,
        )


# ══════════════════════════════════════════════════════════════
# ASSEMBLY
# ══════════════════════════════════════════════════════════════

def build_dispatcher(
    registry: ResourceRegistry,
    events: Iterable[Event] = (),
    *,
    settings: Optional[TimelineSettings] = None,
    id_provider: Optional[IdProvider] = None,
    publisher: Optional[SnapshotPublisher] = None,
    clock: Optional[Clock] = None,
) -> MutationDispatcher:
    """
    Wire store, validator and dispatcher from settings.

    Initial events must already satisfy the data-model invariants;
    an invalid one raises ValueError at start-up.
    """
    settings = settings or TimelineSettings()
    validator = Validator(registry)
    if not settings.allow_overlap:
        validator.register_rule(no_overlap_rule)

    accepted = EventSnapshot()
    for event in events:
        if event.id in accepted:
            raise ValueError(f"Initial event id '{event.id}' is duplicated.")
        validation = validator.validate(event, prior=None, snapshot=accepted)
        if not validation.is_valid:
            raise ValueError(
                f"Initial event '{event.id}' is invalid: "
                f"[{validation.reason.code}] {validation.reason.message}"
            )
        accepted = accepted.with_appended(event)

    return MutationDispatcher(
        store=EventStore(accepted.list()),
        validator=validator,
        id_provider=id_provider,
        publisher=publisher,
        settings=settings,
        clock=clock,
    )
