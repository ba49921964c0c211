"""Repository for the Reservation aggregate.

Adds the keyed lookups the lifecycle and the reminder scan need on top of
Protean's base ``add``/``get``. Date-times are stored as UTC, so bounds are
normalised with ``as_utc`` and pushed into the query.
"""

from datetime import datetime

from protean.exceptions import ObjectNotFoundError

from reservations.domain import reservations
from reservations.reservation.exceptions import ReservationNotFound
from reservations.reservation.reservation import Reservation, ReservationStatus, as_utc

PAGE_SIZE = 100


@reservations.repository(part_of=Reservation)
class ReservationRepository:
    def find_by_id(self, reservation_id) -> Reservation:
        """Load a reservation or raise ``ReservationNotFound``."""
        try:
            return self.get(str(reservation_id))
        except ObjectNotFoundError as exc:
            raise ReservationNotFound(reservation_id) from exc

    def find_upcoming_for_email(self, email: str, after: datetime) -> list[Reservation]:
        """CONFIRMED reservations for ``email`` scheduled strictly after ``after``."""
        return self._all(
            self._dao.query.filter(
                email=email,
                status=ReservationStatus.CONFIRMED.value,
                reservation_datetime__gt=as_utc(after),
            )
        )

    def find_due_for_reminder(self, window_start: datetime, window_end: datetime) -> list[Reservation]:
        """CONFIRMED, not yet reminded reservations inside ``[window_start, window_end)``."""
        return self._all(
            self._dao.query.filter(
                status=ReservationStatus.CONFIRMED.value,
                reminder_sent=False,
                reservation_datetime__gte=as_utc(window_start),
                reservation_datetime__lt=as_utc(window_end),
            )
        )

    def _all(self, queryset) -> list[Reservation]:
        """Drain a queryset page by page, ordered by reservation time."""
        queryset = queryset.order_by("reservation_datetime")
        items: list[Reservation] = []
        offset = 0
        while True:
            page = queryset.offset(offset).limit(PAGE_SIZE).all().items
            items.extend(page)
            if len(page) < PAGE_SIZE:
                return items
            offset += PAGE_SIZE
