"""Known top-level domains.

A bare domain such as ``google.com`` is only linked when it ends in one of
these. Generic TLDs first, then every two-letter country code.
"""

GENERIC_TLDS: tuple[str, ...] = (
    "academy", "accountant", "accountants", "actor", "adult", "aero", "agency",
    "airforce", "apartments", "app", "archi", "army", "art", "arpa", "asia",
    "associates", "attorney", "auction", "audio", "auto", "autos", "baby",
    "band", "bank", "bar", "bargains", "bayern", "beer", "berlin", "best",
    "bet", "bid", "bike", "bingo", "bio", "biz", "black", "blog", "blue",
    "boutique", "build", "builders", "business", "buzz", "cab", "cafe", "cam",
    "camera", "camp", "capital", "car", "cards", "care", "career", "careers",
    "cars", "casa", "cash", "casino", "cat", "catering", "center", "ceo",
    "chat", "cheap", "christmas", "church", "city", "claims", "cleaning",
    "click", "clinic", "clothing", "cloud", "club", "coach", "codes", "coffee",
    "college", "com", "community", "company", "computer", "condos",
    "construction", "consulting", "contractors", "cooking", "cool", "coop",
    "country", "coupons", "courses", "credit", "creditcard", "cricket",
    "cruises", "dance", "dating", "deals", "degree", "delivery", "democrat",
    "dental", "dentist", "design", "dev", "diamonds", "diet", "digital",
    "direct", "directory", "discount", "doctor", "dog", "domains", "download",
    "earth", "eco", "edu", "education", "email", "energy", "engineer",
    "engineering", "enterprises", "equipment", "estate", "eus", "events",
    "exchange", "expert", "exposed", "express", "fail", "faith", "family",
    "fans", "farm", "fashion", "film", "finance", "financial", "fish",
    "fishing", "fit", "fitness", "flights", "florist", "flowers", "football",
    "forsale", "foundation", "fun", "fund", "furniture", "futbol", "fyi",
    "gallery", "game", "games", "garden", "gay", "gift", "gifts", "gives",
    "glass", "global", "gmbh", "gold", "golf", "gov", "graphics", "gratis",
    "green", "gripe", "group", "guide", "guitars", "guru", "hamburg", "haus",
    "health", "healthcare", "help", "hiphop", "hockey", "holdings", "holiday",
    "homes", "horse", "hospital", "host", "hosting", "house", "how",
    "immobilien", "inc", "industries", "info", "ink", "institute", "insure",
    "int", "international", "investments", "irish", "jetzt", "jewelry", "jobs",
    "kaufen", "kim", "kitchen", "kiwi", "koeln", "land", "lawyer", "lease",
    "legal", "lgbt", "life", "lighting", "limited", "limo", "link", "live",
    "llc", "loan", "loans", "lol", "london", "love", "ltd", "luxury",
    "maison", "management", "market", "marketing", "mba", "media", "memorial",
    "men", "menu", "mil", "mobi", "moda", "moe", "mom", "money", "monster",
    "mortgage", "motorcycles", "movie", "museum", "music", "name", "navy",
    "net", "network", "news", "ngo", "ninja", "nyc", "observer", "one",
    "onl", "online", "ooo", "org", "organic", "paris", "partners", "parts",
    "party", "pet", "photo", "photography", "photos", "pics", "pictures",
    "pink", "pizza", "place", "plumbing", "plus", "poker", "porn", "post",
    "press", "pro", "productions", "promo", "properties", "property", "pub",
    "quebec", "racing", "radio", "realestate", "realty", "recipes", "red",
    "rehab", "reise", "reisen", "rent", "rentals", "repair", "report",
    "republican", "rest", "restaurant", "review", "reviews", "rich", "rip",
    "rocks", "rodeo", "run", "sale", "salon", "sarl", "school", "schule",
    "science", "scot", "security", "services", "sex", "sexy", "shiksha",
    "shoes", "shop", "shopping", "show", "singles", "site", "ski", "soccer",
    "social", "software", "solar", "solutions", "space", "store", "stream",
    "studio", "study", "style", "sucks", "supplies", "supply", "support",
    "surf", "surgery", "swiss", "systems", "tattoo", "tax", "taxi", "team",
    "tech", "technology", "tel", "tennis", "theater", "tickets", "tienda",
    "tips", "tires", "today", "tokyo", "tools", "top", "tours", "town",
    "toys", "trade", "trading", "training", "travel", "tube", "university",
    "uno", "vacations", "vegas", "ventures", "vet", "viajes", "video",
    "villas", "vin", "vip", "vision", "vodka", "vote", "voting", "voto",
    "voyage", "wales", "wang", "watch", "webcam", "website", "wed",
    "wedding", "wien", "wiki", "win", "wine", "work", "works", "world",
    "wtf", "xxx", "xyz", "yoga", "zone",
)

COUNTRY_CODE_TLDS: tuple[str, ...] = (
    "ac", "ad", "ae", "af", "ag", "ai", "al", "am", "ao", "aq", "ar", "as",
    "at", "au", "aw", "ax", "az", "ba", "bb", "bd", "be", "bf", "bg", "bh",
    "bi", "bj", "bm", "bn", "bo", "br", "bs", "bt", "bw", "by", "bz", "ca",
    "cc", "cd", "cf", "cg", "ch", "ci", "ck", "cl", "cm", "cn", "co", "cr",
    "cu", "cv", "cw", "cx", "cy", "cz", "de", "dj", "dk", "dm", "do", "dz",
    "ec", "ee", "eg", "er", "es", "et", "eu", "fi", "fj", "fk", "fm", "fo",
    "fr", "ga", "gb", "gd", "ge", "gf", "gg", "gh", "gi", "gl", "gm", "gn",
    "gp", "gq", "gr", "gs", "gt", "gu", "gw", "gy", "hk", "hm", "hn", "hr",
    "ht", "hu", "id", "ie", "il", "im", "in", "io", "iq", "ir", "is", "it",
    "je", "jm", "jo", "jp", "ke", "kg", "kh", "ki", "km", "kn", "kp", "kr",
    "kw", "ky", "kz", "la", "lb", "lc", "li", "lk", "lr", "ls", "lt", "lu",
    "lv", "ly", "ma", "mc", "md", "me", "mg", "mh", "mk", "ml", "mm", "mn",
    "mo", "mp", "mq", "mr", "ms", "mt", "mu", "mv", "mw", "mx", "my", "mz",
    "na", "nc", "ne", "nf", "ng", "ni", "nl", "no", "np", "nr", "nu", "nz",
    "om", "pa", "pe", "pf", "pg", "ph", "pk", "pl", "pm", "pn", "pr", "ps",
    "pt", "pw", "py", "qa", "re", "ro", "rs", "ru", "rw", "sa", "sb", "sc",
    "sd", "se", "sg", "sh", "si", "sk", "sl", "sm", "sn", "so", "sr", "ss",
    "st", "su", "sv", "sx", "sy", "sz", "tc", "td", "tf", "tg", "th", "tj",
    "tk", "tl", "tm", "tn", "to", "tr", "tt", "tv", "tw", "tz", "ua", "ug",
    "uk", "us", "uy", "uz", "va", "vc", "ve", "vg", "vi", "vn", "vu", "wf",
    "ws", "ye", "yt", "za", "zm", "zw",
)

KNOWN_TLDS: frozenset[str] = frozenset(GENERIC_TLDS + COUNTRY_CODE_TLDS)
