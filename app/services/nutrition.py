"""Synthetic nutrition data for the dashboard chart. Random on every call."""
import random
from datetime import date, timedelta

from app.schemas.nutrition import DailyIntakeSchema, MacrosSchema, MicrosSchema

DEFAULT_DAYS = 30

# label, section, field, colour
NUTRIENTS = [
    ("Protein", "macros", "protein", "#3b82f6"),
    ("Carbs", "macros", "carbs", "#22c55e"),
    ("Fats", "macros", "fats", "#eab308"),
    ("Vitamins", "micros", "vitamins", "#a855f7"),
    ("Minerals", "micros", "minerals", "#ec4899"),
    ("Fiber", "micros", "fiber", "#f97316"),
]


def generate_mock_intake(days: int = DEFAULT_DAYS, today: date | None = None, rng: random.Random | None = None) -> list[DailyIntakeSchema]:
    """One entry per day, oldest first, ending today."""
    rng = rng or random.Random()
    today = today or date.today()
    return [
        DailyIntakeSchema(
            date=today - timedelta(days=days - i - 1),
            macros=MacrosSchema(
                protein=rng.randint(50, 149),
                carbs=rng.randint(100, 249),
                fats=rng.randint(30, 79),
            ),
            micros=MicrosSchema(
                vitamins=rng.randint(0, 99),
                minerals=rng.randint(0, 99),
                fiber=rng.randint(0, 29),
            ),
        )
        for i in range(days)
    ]


def build_chart_series(intake: list[DailyIntakeSchema]) -> dict:
    """Stacked bar series: one per nutrient, one value per day, plus daily totals."""
    series = [
        {
            "name": label,
            "color": color,
            "data": [getattr(getattr(d, section), field) for d in intake],
        }
        for label, section, field, color in NUTRIENTS
    ]
    totals = [sum(s["data"][i] for s in series) for i in range(len(intake))]
    return {
        "dates": [d.date.isoformat() for d in intake],
        "series": series,
        "totals": totals,
        "max_total": max(totals, default=0),
    }
