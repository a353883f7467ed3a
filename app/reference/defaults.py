"""
Built-in reference data: input limits, bank rates and asset CAGRs.

Rates are annual percentages. Bank rates are indicative demo values and
are meant to be overridden through REFERENCE_DATA_PATH or the update API.
"""

DEFAULT_LIMITS = {
    "hypo": {
        "amount": {"min": 5000, "max": 600000, "step": 1000},
        "years": {"min": 1, "max": 40, "step": 1},
    },
    "nehypo": {
        "amount": {"min": 500, "max": 40000, "step": 100},
        "years": {"min": 1, "max": 8, "step": 1},
    },
}

DEFAULT_BANKS = {
    "hypo": [
        {"id": "slsp", "name": "Slovenská sporiteľňa", "rate": 3.69},
        {"id": "vub", "name": "VÚB", "rate": 3.89},
        {"id": "tatrabanka", "name": "Tatra banka", "rate": 3.19},
        {"id": "csob", "name": "ČSOB", "rate": 3.5},
        {"id": "unicredit", "name": "UniCredit Bank", "rate": 3.49},
        {"id": "365", "name": "365.bank", "rate": 3.35},
        {"id": "mbank", "name": "mBank", "rate": 3.9},
        {"id": "prima", "name": "Prima banka", "rate": 3.4},
    ],
    "nehypo": [
        {"id": "slsp_nh", "name": "Slovenská sporiteľňa", "rate": 6.49},
        {"id": "vub_nh", "name": "VÚB", "rate": 6.3},
        {"id": "tb_nh", "name": "Tatra banka", "rate": 7.5},
        {"id": "csob_nh", "name": "ČSOB", "rate": 7.9},
        {"id": "unicredit_nh", "name": "UniCredit Bank", "rate": 5.99},
        {"id": "365_nh", "name": "365.bank", "rate": 6.0},
        {"id": "mbank_nh", "name": "mBank", "rate": 5.89},
        {"id": "prima_nh", "name": "Prima banka", "rate": 9.5},
    ],
}

DEFAULT_ASSETS = [
    {"id": "sp500", "name": "S&P 500 (TR)", "rate": 10},
    {"id": "apple", "name": "Apple", "rate": 24},
    {"id": "microsoft", "name": "Microsoft", "rate": 23},
    {"id": "nvidia", "name": "NVIDIA", "rate": 55},
    {"id": "alphabet", "name": "Alphabet (Google)", "rate": 18},
    {"id": "amazon", "name": "Amazon", "rate": 20},
    {"id": "meta", "name": "Meta (Facebook)", "rate": 17},
    {"id": "tsmc", "name": "TSMC", "rate": 19},
    {"id": "berkshire", "name": "Berkshire Hathaway", "rate": 11},
    {"id": "tesla", "name": "Tesla", "rate": 35},
    {"id": "saudi", "name": "Saudi Aramco", "rate": 5},
]
