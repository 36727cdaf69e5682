"""
Unibet recurring tournament schedule.

The Unibet lobby cannot be scraped, so its schedule is modelled statically and
projected onto real dates by `normalize_unibet`. Times are Paris local.
Weekly entries use Python weekdays (0=Monday ... 6=Sunday).
"""

UNIBET_LOBBY_URL = "https://www.unibet.fr/poker/tournaments"

UNIBET_SCHEDULE = {
    "daily": [
        {"slug": "freeroll-daily", "name": "Unibet Freeroll Daily", "time": "12:00",
         "buyin": 0, "guarantee": 250, "format": "freeroll", "gameVariant": "nlhe"},
        {"slug": "daily-5k", "name": "Unibet Daily 5K", "time": "18:30",
         "buyin": 5, "guarantee": 5000, "format": "standard", "gameVariant": "nlhe"},
        {"slug": "daily-10k", "name": "Unibet Daily 10K", "time": "19:00",
         "buyin": 10, "guarantee": 10000, "format": "standard", "gameVariant": "nlhe"},
        {"slug": "daily-20k", "name": "Unibet Daily 20K", "time": "20:00",
         "buyin": 20, "guarantee": 20000, "format": "standard", "gameVariant": "nlhe"},
        {"slug": "daily-30k", "name": "Unibet Daily 30K Deep", "time": "20:30",
         "buyin": 30, "guarantee": 30000, "format": "standard", "gameVariant": "nlhe"},
        {"slug": "night-turbo", "name": "Unibet Night Turbo", "time": "22:00",
         "buyin": 5, "guarantee": 2000, "format": "turbo", "gameVariant": "nlhe"},
    ],
    "weekly": [
        # Wednesday
        {"slug": "weekly-50k", "weekday": 2, "name": "Unibet Weekly 50K", "time": "20:00",
         "buyin": 50, "guarantee": 50000, "format": "standard", "gameVariant": "nlhe", "special": True},
        # Thursday
        {"slug": "bounty-builder", "weekday": 3, "name": "Unibet Bounty Builder", "time": "20:00",
         "buyin": 20, "guarantee": 10000, "format": "knockout", "gameVariant": "nlhe"},
        {"slug": "turbo-thursday", "weekday": 3, "name": "Unibet Turbo Thursday", "time": "21:00",
         "buyin": 10, "guarantee": 5000, "format": "turbo", "gameVariant": "nlhe"},
        # Friday
        {"slug": "deep-stack", "weekday": 4, "name": "Unibet Deep Stack Friday", "time": "20:00",
         "buyin": 30, "guarantee": 20000, "format": "standard", "gameVariant": "nlhe"},
        # Saturday
        {"slug": "mini-series", "weekday": 5, "name": "Unibet Mini Series", "time": "19:00",
         "buyin": 10, "guarantee": 7500, "format": "standard", "gameVariant": "nlhe"},
        # Sunday
        {"slug": "sunday-75k", "weekday": 6, "name": "Unibet Sunday 75K", "time": "17:00",
         "buyin": 55, "guarantee": 75000, "format": "standard", "gameVariant": "nlhe", "special": True},
        {"slug": "sunday-mini", "weekday": 6, "name": "Unibet Sunday Mini", "time": "17:00",
         "buyin": 11, "guarantee": 10000, "format": "standard", "gameVariant": "nlhe"},
        {"slug": "sunday-special", "weekday": 6, "name": "Unibet Sunday Special", "time": "18:00",
         "buyin": 100, "guarantee": 100000, "format": "standard", "gameVariant": "nlhe", "special": True},
        {"slug": "sunday-bounty", "weekday": 6, "name": "Unibet Sunday Bounty", "time": "19:00",
         "buyin": 30, "guarantee": 20000, "format": "knockout", "gameVariant": "nlhe"},
        {"slug": "late-sunday", "weekday": 6, "name": "Unibet Late Sunday Turbo", "time": "22:00",
         "buyin": 10, "guarantee": 5000, "format": "turbo", "gameVariant": "nlhe"},
    ],
}
