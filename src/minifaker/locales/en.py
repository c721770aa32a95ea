"""English locale data."""

# fmt: off
LOCALE = {
    "firstNames": [
        "Aaron", "Abigail", "Adam", "Alice", "Amelia", "Benjamin", "Charlotte",
        "Daniel", "Eleanor", "Emily", "Ethan", "Grace", "Henry", "Isabella",
        "Jack", "James", "Liam", "Lucy", "Mason", "Mia", "Noah", "Olivia",
        "Samuel", "Sophia", "William",
    ],
    "maleFirstNames": [
        "Aaron", "Adam", "Benjamin", "Daniel", "Ethan", "Henry", "Jack",
        "James", "Liam", "Mason", "Noah", "Samuel", "William",
    ],
    "femaleFirstNames": [
        "Abigail", "Alice", "Amelia", "Charlotte", "Eleanor", "Emily", "Grace",
        "Isabella", "Lucy", "Mia", "Olivia", "Sophia",
    ],
    "lastNames": [
        "Anderson", "Baker", "Brown", "Clark", "Davis", "Evans", "Garcia",
        "Harris", "Jackson", "Johnson", "Lewis", "Martin", "Miller", "Moore",
        "Robinson", "Smith", "Taylor", "Thomas", "Thompson", "Walker", "White",
        "Williams", "Wilson", "Wright", "Young",
    ],
    "phoneFormats": [
        "###-###-####",
        "(###) ###-####",
        "1-###-###-####",
        "###.###.####",
    ],
    "cityPrefixes": ["North", "East", "West", "South", "New", "Lake", "Port"],
    "cityNames": [
        "Ashford", "Bridgewater", "Clayton", "Fairview", "Franklin", "Georgetown",
        "Greenville", "Kingston", "Madison", "Marion", "Milton", "Oakland",
        "Riverside", "Salem", "Springfield", "Winchester",
    ],
    "citySuffixes": [
        "town", "ton", "land", "ville", "berg", "burgh", "borough", "bury",
        "view", "port", "mouth", "stad", "furt", "chester", "fort", "haven",
        "side", "shire",
    ],
    "jobDescriptors": [
        "Lead", "Senior", "Direct", "Corporate", "Dynamic", "Future", "Product",
        "National", "Regional", "District", "Central", "Global", "Customer",
        "Investor", "Internal", "International", "Legacy", "Principal",
    ],
    "jobAreas": [
        "Solutions", "Program", "Brand", "Security", "Research", "Marketing",
        "Directives", "Implementation", "Integration", "Functionality",
        "Response", "Paradigm", "Tactics", "Identity", "Markets", "Group",
        "Division", "Applications", "Optimization", "Operations",
        "Infrastructure", "Intranet", "Communications", "Web", "Quality",
        "Assurance", "Mobility", "Accounts", "Data", "Creative",
        "Configuration", "Accountability", "Interactions", "Factors",
        "Usability", "Metrics",
    ],
    "jobTypes": [
        "Supervisor", "Associate", "Executive", "Liaison", "Officer", "Manager",
        "Engineer", "Specialist", "Director", "Coordinator", "Administrator",
        "Architect", "Analyst", "Designer", "Planner", "Orchestrator",
        "Technician", "Developer", "Producer", "Consultant", "Assistant",
        "Facilitator", "Agent", "Representative", "Strategist",
    ],
    "freeEmails": ["gmail.com", "yahoo.com", "hotmail.com", "outlook.com"],
    "domainSuffixes": ["com", "net", "org", "io", "biz", "info", "name"],
    "nouns": [
        "apple", "bridge", "cloud", "desk", "engine", "forest", "garden",
        "harbor", "island", "journey", "kettle", "lantern", "meadow", "night",
        "ocean", "pencil", "river", "signal", "tower", "village",
    ],
    "verbs": [
        "build", "carry", "deliver", "explore", "follow", "gather", "harvest",
        "imagine", "launch", "measure", "navigate", "observe", "protect",
        "reach", "share", "travel", "unlock", "wander",
    ],
    "adjectives": [
        "bright", "calm", "daring", "eager", "fancy", "gentle", "happy",
        "icy", "jolly", "kind", "lively", "mighty", "nimble", "proud", "quiet",
        "rapid", "silent", "tidy", "vivid", "witty",
    ],
    "adverbs": [
        "boldly", "calmly", "eagerly", "freely", "gladly", "happily", "kindly",
        "loudly", "neatly", "openly", "quickly", "rarely", "softly", "wisely",
    ],
    "prepositions": [
        "about", "above", "across", "after", "against", "among", "around",
        "before", "behind", "below", "beside", "between", "beyond", "during",
        "inside", "near", "through", "toward", "under", "within",
    ],
    "conjunctions": [
        "and", "because", "but", "either", "however", "if", "nor", "or",
        "since", "so", "though", "unless", "until", "when", "whereas", "while",
        "yet",
    ],
    "interjections": [
        "ah", "aha", "alas", "bravo", "hey", "hmm", "hooray", "oh", "oops",
        "ouch", "phew", "uh-huh", "wow", "yikes",
    ],
}
# fmt: on
