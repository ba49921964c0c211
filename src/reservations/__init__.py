"""Restaurant reservations: lifecycle, customer notifications and reminders."""
