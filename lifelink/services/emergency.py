import logging
import random
import threading
import uuid
from dataclasses import dataclass, field

from apscheduler.jobstores.base import JobLookupError

logger = logging.getLogger(__name__)

ACTIVE = 'active'
RESOLVED = 'resolved'

DEFAULT_TYPE = 'Mass Casualty'
DEFAULT_LOCATION = 'Downtown Medical Center'
DEFAULT_BLOOD_TYPES = ('O-', 'O+', 'A-')
COUNTDOWN_START = 60
MIN_NOTIFIED = 30
MAX_NOTIFIED = 49
# Resolved events kept for listing; older ones are dropped on the next create
MAX_RESOLVED_EVENTS = 20


class EmergencyStateError(Exception):
    """Raised for a transition the event's current status does not allow."""


class EmergencyNotFound(KeyError):
    pass


@dataclass
class EmergencyEvent:
    id: str
    type: str
    location: str
    blood_types_needed: list
    countdown: int
    donors_notified: int
    donors_responded: int = 0
    status: str = ACTIVE
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    @property
    def is_active(self):
        return self.status == ACTIVE

    # Ticks return False once there is nothing left for them to change

    def respond_tick(self):
        with self._lock:
            if not self.is_active:
                return False
            if self.donors_responded < self.donors_notified:
                self.donors_responded += 1
            return self.donors_responded < self.donors_notified

    def countdown_tick(self):
        with self._lock:
            if not self.is_active:
                return False
            if self.countdown > 0:
                self.countdown -= 1
            return self.countdown > 0

    def resolve(self):
        with self._lock:
            if not self.is_active:
                raise EmergencyStateError(f'Emergency {self.id} is already {self.status}')
            self.status = RESOLVED

    def alert_message(self):
        return (f"EMERGENCY ALERT: {self.type} at {self.location}. Notifying "
                f"{self.donors_notified} potential donors for blood types: "
                f"{', '.join(self.blood_types_needed)}")

    def to_dict(self):
        with self._lock:
            return {
                'id': self.id,
                'type': self.type,
                'location': self.location,
                'bloodTypesNeeded': list(self.blood_types_needed),
                'countdown': self.countdown,
                'donorsNotified': self.donors_notified,
                'donorsResponded': self.donors_responded,
                'status': self.status,
            }


def create_event(type=None, location=None, blood_types=None, rng=None):
    rng = rng or random
    return EmergencyEvent(
        id=uuid.uuid4().hex[:7],
        type=type or DEFAULT_TYPE,
        location=location or DEFAULT_LOCATION,
        blood_types_needed=list(blood_types or DEFAULT_BLOOD_TYPES),
        countdown=COUNTDOWN_START,
        donors_notified=rng.randint(MIN_NOTIFIED, MAX_NOTIFIED),
    )


class EmergencyTimers:
    """Interval callbacks for active events, backed by the app's APScheduler."""

    def __init__(self, scheduler, response_interval=3, countdown_interval=60):
        self.scheduler = scheduler
        self.response_interval = response_interval
        self.countdown_interval = countdown_interval

    @staticmethod
    def job_ids(event_id):
        return (f'emergency-{event_id}-responses', f'emergency-{event_id}-countdown')

    def start(self, event):
        response_job, countdown_job = self.job_ids(event.id)
        self.scheduler.add_job(id=response_job, func=self._until_done(response_job, event.respond_tick),
                               trigger='interval', seconds=self.response_interval)
        self.scheduler.add_job(id=countdown_job, func=self._until_done(countdown_job, event.countdown_tick),
                               trigger='interval', seconds=self.countdown_interval)

    def _until_done(self, job_id, tick):
        def run():
            if not tick():
                self._remove(job_id)
                logger.debug('Emergency job %s finished', job_id)
        return run

    def _remove(self, job_id):
        try:
            self.scheduler.remove_job(job_id)
        except JobLookupError:
            pass

    def cancel(self, event_id):
        for job_id in self.job_ids(event_id):
            self._remove(job_id)


class EmergencyRegistry:
    """In-process store of simulated emergencies."""

    def __init__(self, timers, rng=None):
        self.timers = timers
        self.rng = rng
        self._events = {}
        self._lock = threading.Lock()

    def create(self, type=None, location=None, blood_types=None):
        event = create_event(type, location, blood_types, rng=self.rng)
        with self._lock:
            self._drop_old_resolved()
            self._events[event.id] = event
        self.timers.start(event)
        logger.warning(event.alert_message())
        return event

    def _drop_old_resolved(self):
        resolved = [event_id for event_id, event in self._events.items() if not event.is_active]
        for event_id in resolved[:-MAX_RESOLVED_EVENTS]:
            del self._events[event_id]

    def get(self, event_id):
        with self._lock:
            event = self._events.get(event_id)
        if event is None:
            raise EmergencyNotFound(event_id)
        return event

    def list(self):
        with self._lock:
            return list(self._events.values())

    def resolve(self, event_id):
        event = self.get(event_id)
        event.resolve()
        self.timers.cancel(event_id)
        logger.info('Emergency %s resolved with %d/%d donors responding',
                    event_id, event.donors_responded, event.donors_notified)
        return event

    def reset(self, event_id):
        with self._lock:
            event = self._events.pop(event_id, None)
        if event is None:
            raise EmergencyNotFound(event_id)
        self.timers.cancel(event_id)
        return event
