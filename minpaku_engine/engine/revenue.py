from .types import DAYS_PER_MONTH


def booked_days(occupancy_pct: float) -> float:
    return DAYS_PER_MONTH * occupancy_pct / 100


def number_of_stays(days_booked: float, stay_length: float) -> float:
    return days_booked / stay_length


def calculate_revenue(adr: float, days_booked: float, stays: float, cleaning_fee_per_stay: float) -> dict:
    accommodation = adr * days_booked
    cleaning = cleaning_fee_per_stay * stays
    return {
        "accommodation": accommodation,
        "cleaning": cleaning,
        "total": accommodation + cleaning,
    }
