from typing import ClassVar


class Defaults:
    FALLBACK_ZONE = "UTC"
    US_ZONE = "America/New_York"
    EU_ZONE = "Europe/Berlin"
    SMART_CUTOFF_DAYS = 7
    INVALID_MARKER = "Invalid Date"


class Patterns:
    US_DATE = "MM/dd/yyyy"
    EU_DATE = "dd.MM.yyyy"
    HUMAN_DATE_TIME = "MMMM d, yyyy h:mm a"
    LOCAL_TIMESTAMP = "MM/dd/yyyy h:mm a"
    ISO_MINUTE = "yyyy-MM-dd'T'HH:mm"


class Durations:
    MS_PER_SECOND = 1_000
    MS_PER_MINUTE = 60 * MS_PER_SECOND
    MS_PER_HOUR = 60 * MS_PER_MINUTE
    MS_PER_DAY = 24 * MS_PER_HOUR
    MS_PER_MONTH = 30 * MS_PER_DAY
    MS_PER_YEAR = 365 * MS_PER_DAY
    # datetime(1, 1, 1, tzinfo=UTC) and datetime(9999, 12, 31, 23, 59, 59, 999000, tzinfo=UTC)
    MIN_EPOCH_MS = -62_135_596_800_000
    MAX_EPOCH_MS = 253_402_300_799_999


class Labels:
    JUST_NOW = "just now"
    FUTURE_PREFIX = "in "
    PAST_SUFFIX = " ago"
    MONTH_NAMES: ClassVar[tuple[str, ...]] = (
        "January",
        "February",
        "March",
        "April",
        "May",
        "June",
        "July",
        "August",
        "September",
        "October",
        "November",
        "December",
    )
    WEEKDAY_NAMES: ClassVar[tuple[str, ...]] = (
        "Monday",
        "Tuesday",
        "Wednesday",
        "Thursday",
        "Friday",
        "Saturday",
        "Sunday",
    )


class EnvVars:
    TZ = "TZ"
    FALLBACK_ZONE = "TIMESHAPE_FALLBACK_ZONE"
    SMART_CUTOFF_DAYS = "TIMESHAPE_SMART_CUTOFF_DAYS"
    INVALID_MARKER = "TIMESHAPE_INVALID_MARKER"


class LogLevels:
    NORMAL = 0
    VERBOSE = 1
    DEBUG = 2
