"""Display helpers for Brazilian-real amounts and percentages."""


def format_currency(amount: float) -> str:
    """Return ``amount`` as BRL, e.g. ``R$ 1.234,56`` or ``-R$ 10,00``."""
    value = round(float(amount), 2)
    sign = "-" if value < 0 else ""
    grouped = f"{abs(value):,.2f}"
    # swap the en-US separators for pt-BR ones
    localized = grouped.replace(",", "_").replace(".", ",").replace("_", ".")
    return f"{sign}R$ {localized}"


def format_percentage(percentage: float) -> str:
    percentage = float(percentage) + 0.0  # folds -0.0 into 0.0
    sign = "+" if percentage >= 0 else ""
    return f"{sign}{percentage:.2f}%"
