# Capital Gains Tax Defaults

CURRENCY = "CZK"

# Flat tax on investment gains realized at withdrawal
DEFAULT_CAPITAL_GAINS_RATE = 0.15

# Holding period after which gains on securities are exempt (time test)
TIME_TEST_YEARS = 3

# Calculator defaults (percent-valued, as the inputs are edited)
DEFAULT_INITIAL_BALANCE = 100000.0
DEFAULT_ANNUAL_RETURN_PCT = 8.0
DEFAULT_MANAGEMENT_FEE_PCT = 0.5
DEFAULT_PERFORMANCE_FEE_PCT = 10.0
DEFAULT_TAX_RATE_PCT = 15.0

# (start_year, end_year, monthly_amount, kind)
DEFAULT_PHASES = [
    (1,  5,  1000.0, "contribute"),
    (6,  15, 3000.0, "contribute"),
    (16, 25, 8000.0, "contribute"),
    (26, 35, 4000.0, "withdraw"),
]
