"""
Client quote text for a rent-to-own offer.
"""
import math

from .rounding import round_half_up

INVALID_MARKER = "н/д"

# ru-RU groups thousands with a no-break space
THOUSANDS_SEPARATOR = "\u00a0"


def format_amount(amount: float) -> str:
    """Format a currency figure as a grouped integer, e.g. 1 000 000."""
    if amount is None or not math.isfinite(amount):
        return INVALID_MARKER
    rounded = round_half_up(amount)
    return f"{rounded:,}".replace(",", THOUSANDS_SEPARATOR)


def _format_term(months) -> str:
    # Plain digits, never scientific notation
    if isinstance(months, float) and months.is_integer():
        return str(int(months))
    return str(months)


def build_quote_text(client_name: str, car_model: str, deposit: float, months, rows) -> str:
    """
    Build the message sent to the client.

    One block per row with PV, deposit, rounded rates and term.
    Returns an empty string when there are no rows.
    """
    if not rows:
        return ""

    formatted_deposit = format_amount(deposit)
    formatted_term = _format_term(months)

    text = f"Необходимо отправить расчет клиенту {client_name}\n\n"
    text += "Добрый день,\n"
    text += f"Для аренды с выкупом {car_model} - математика будет примерно следующая:\n\n"

    for row in rows:
        formatted_pv = format_amount(row.pv)
        formatted_rate = format_amount(row.rate_over_15_rounded)
        formatted_rate_under_15 = format_amount(row.rate_under_15_rounded)

        text += f"ПВ {formatted_pv} ₽ + депозит {formatted_deposit} ₽ + 15 дней:\n"
        text += f"ставка {formatted_rate} ₽/сут ({formatted_rate_under_15} ₽ при оплате менее 15 дней)\n"
        text += f"срок {formatted_term} мес.\n\n"

    return text
