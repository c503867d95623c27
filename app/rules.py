from pydantic import BaseModel, ConfigDict


class RuleSet(BaseModel):
    """Allowed values and numeric bounds for an availability request.

    The first entry of every allowed collection doubles as the default used
    when the field is absent from the request.
    """

    model_config = ConfigDict(frozen=True)

    languages: tuple[str, ...] = ("en", "fr", "de", "es")
    currencies: tuple[str, ...] = ("USD", "EUR", "GBP")
    nationalities: tuple[str, ...] = ("US", "GB", "CA")
    markets: tuple[str, ...] = ("ES", "US", "GB", "CA")
    search_types: tuple[str, ...] = ("Single", "Multiple")

    options_quota_default: int = 20
    options_quota_max: int = 50

    earliest_start_days: int = 2
    enforce_earliest_start: bool = False
    min_stay_days: int = 3

    max_child_age: int = 5

    discount: float = 0.8  # minimumSellingPrice floor (20% max discount)


DEFAULT_RULES = RuleSet()
