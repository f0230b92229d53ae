def generate_booking_creation_message(instance) -> str:
    message = (
        "🆕 New booking created\n"
        f"Booking ID: {instance.id}\n"
        f"User: {instance.user.email}\n"
        f"Hotel: {instance.hotel.name}\n"
        f"Room: {instance.room.number}\n"
        f"Check-in: {instance.check_in_date}\n"
        f"Check-out: {instance.check_out_date}\n"
        f"Guests: {instance.guests}\n"
        f"Total price: {instance.total_price}"
    )
    return message


def generate_booking_cancellation_message(instance) -> str:
    message = (
        "❌ Booking Canceled\n"
        f"Booking ID: {instance.id}\n"
        f"User: {instance.user.email}\n"
        f"Room: {instance.room.number}\n"
        f"Dates: {instance.check_in_date} - {instance.check_out_date}\n"
        f"Cancelled at: {instance.cancelled_at:%Y-%m-%d %H:%M}"
    )
    return message


def generate_review_message(instance) -> str:
    message = (
        "⭐ New review\n"
        f"Hotel: {instance.hotel.name}\n"
        f"Booking ID: {instance.booking_id}\n"
        f"User: {instance.user.email}\n"
        f"Rating: {instance.rating}/5"
    )
    if instance.comment:
        message += f"\nComment: {instance.comment}"
    return message
