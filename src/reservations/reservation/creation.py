"""Reservation creation — command and handler."""

from protean.fields import DateTime, Integer, String
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from reservations.domain import reservations
from reservations.reservation.reservation import NotificationChannel, Reservation


@reservations.command(part_of="Reservation")
class CreateReservation:
    customer_name = String(required=True, max_length=100)
    phone_number = String(required=True, max_length=20)
    email = String(required=True, max_length=254)
    reservation_datetime = DateTime(required=True)
    party_size = Integer(required=True, min_value=1)
    notification_channel = String(required=True, choices=NotificationChannel)


@reservations.command_handler(part_of=Reservation)
class CreateReservationHandler:
    @handle(CreateReservation)
    def create_reservation(self, command):
        reservation = Reservation.create(
            customer_name=command.customer_name,
            phone_number=command.phone_number,
            email=command.email,
            reservation_datetime=command.reservation_datetime,
            party_size=command.party_size,
            notification_channel=command.notification_channel,
        )
        current_domain.repository_for(Reservation).add(reservation)
        return str(reservation.id)
