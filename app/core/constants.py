"""Reward defaults shared by settings and the rewards module."""

DEFAULT_REWARD_THRESHOLDS: list[int] = [100, 250, 500, 750, 1000, 1500, 2000, 3000]

DEFAULT_TEAM_SPORTS: list[str] = ["basketball", "football", "volleyball", "hockey", "handball"]

DEFAULT_OUTDOOR_SPORTS: list[str] = ["running", "bikeSports", "swimming", "climbing", "trekking", "surfing", "skating",
                                     "walking", "raquetSports", ]
