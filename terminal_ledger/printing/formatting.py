from datetime import date, datetime


def format_date(value: date) -> str:
    """08 Jan 2026"""
    return value.strftime("%d %b %Y")


def format_time(value: str) -> str:
    """24-hour "14:30" to "2:30 PM" """
    parsed = datetime.strptime(value, "%H:%M")
    hour = parsed.hour % 12 or 12
    period = "PM" if parsed.hour >= 12 else "AM"
    return f"{hour}:{parsed.minute:02d} {period}"


def format_departure(day: date, departure_time: str) -> str:
    return f"{format_date(day)} | {format_time(departure_time)}"


def format_amount(amount: float, currency: str) -> str:
    """Whole amounts print without decimals, split discounts keep two"""
    if float(amount).is_integer():
        return f"{int(amount)} {currency}"
    return f"{amount:.2f} {currency}"
