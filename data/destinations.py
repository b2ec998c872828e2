# Static destination catalog
# Each row is one destination with its region (state), category,
# relative cost factor (1.0 = average) and popularity (1-10).
# Loaded once into a DestinationCatalog at process start.

DESTINATIONS = [
    {
        "id": "goa",
        "name": "Goa",
        "region": "Goa",
        "category": "beach",
        "cost_factor": 1.2,
        "popularity": 9,
        "description": "Sun-kissed beaches, Portuguese heritage and a lively nightlife."
    },
    {
        "id": "jaipur",
        "name": "Jaipur",
        "region": "Rajasthan",
        "category": "historical",
        "cost_factor": 1.0,
        "popularity": 8,
        "description": "The Pink City of forts, palaces and bustling bazaars."
    },
    {
        "id": "varanasi",
        "name": "Varanasi",
        "region": "Uttar Pradesh",
        "category": "spiritual",
        "cost_factor": 0.8,
        "popularity": 7,
        "description": "Ancient ghats on the Ganges and the evening aarti."
    },
    {
        "id": "darjeeling",
        "name": "Darjeeling",
        "region": "West Bengal",
        "category": "mountain",
        "cost_factor": 0.9,
        "popularity": 7,
        "description": "Tea gardens and views of Kanchenjunga."
    },
    {
        "id": "mumbai",
        "name": "Mumbai",
        "region": "Maharashtra",
        "category": "city",
        "cost_factor": 1.5,
        "popularity": 8,
        "description": "India's financial capital, Bollywood and Marine Drive."
    },
    {
        "id": "ranthambore",
        "name": "Ranthambore National Park",
        "region": "Rajasthan",
        "category": "wildlife",
        "cost_factor": 1.3,
        "popularity": 7,
        "description": "Tiger reserve set around a 10th century fort."
    },
    {
        "id": "munnar",
        "name": "Munnar",
        "region": "Kerala",
        "category": "mountain",
        "cost_factor": 0.85,
        "popularity": 8,
        "description": "Rolling tea estates in the Western Ghats."
    },
    {
        "id": "rishikesh",
        "name": "Rishikesh",
        "region": "Uttarakhand",
        "category": "spiritual",
        "cost_factor": 0.75,
        "popularity": 8,
        "description": "Yoga capital of the world on the banks of the Ganges."
    },
    {
        "id": "udaipur",
        "name": "Udaipur",
        "region": "Rajasthan",
        "category": "historical",
        "cost_factor": 1.1,
        "popularity": 8,
        "description": "The City of Lakes with its lakeside palaces."
    },
    {
        "id": "andaman",
        "name": "Andaman Islands",
        "region": "Andaman & Nicobar",
        "category": "beach",
        "cost_factor": 1.6,
        "popularity": 9,
        "description": "Turquoise water, coral reefs and white sand beaches."
    },
    {
        "id": "ladakh",
        "name": "Leh-Ladakh",
        "region": "Ladakh",
        "category": "mountain",
        "cost_factor": 1.4,
        "popularity": 9,
        "description": "High-altitude desert, monasteries and mountain passes."
    },
    {
        "id": "kaziranga",
        "name": "Kaziranga National Park",
        "region": "Assam",
        "category": "wildlife",
        "cost_factor": 1.1,
        "popularity": 7,
        "description": "Home of the one-horned rhinoceros."
    },
    {
        "id": "hampi",
        "name": "Hampi",
        "region": "Karnataka",
        "category": "historical",
        "cost_factor": 0.85,
        "popularity": 8,
        "description": "Boulder-strewn ruins of the Vijayanagara empire."
    },
    {
        "id": "khajuraho",
        "name": "Khajuraho",
        "region": "Madhya Pradesh",
        "category": "historical",
        "cost_factor": 0.9,
        "popularity": 7,
        "description": "Temples famous for their intricate sculpture."
    },
    {
        "id": "kodaikanal",
        "name": "Kodaikanal",
        "region": "Tamil Nadu",
        "category": "mountain",
        "cost_factor": 0.9,
        "popularity": 7,
        "description": "The Princess of Hill Stations, with a star-shaped lake."
    },
    {
        "id": "mahabalipuram",
        "name": "Mahabalipuram",
        "region": "Tamil Nadu",
        "category": "historical",
        "cost_factor": 0.85,
        "popularity": 7,
        "description": "Shore Temple and Pallava rock-cut monuments."
    },
    {
        "id": "pushkar",
        "name": "Pushkar",
        "region": "Rajasthan",
        "category": "spiritual",
        "cost_factor": 0.8,
        "popularity": 7,
        "description": "Sacred lake town known for its camel fair."
    },
    {
        "id": "shillong",
        "name": "Shillong",
        "region": "Meghalaya",
        "category": "mountain",
        "cost_factor": 1.0,
        "popularity": 7,
        "description": "Pine hills, waterfalls and living root bridges nearby."
    },
    {
        "id": "amritsar",
        "name": "Amritsar",
        "region": "Punjab",
        "category": "spiritual",
        "cost_factor": 0.95,
        "popularity": 8,
        "description": "The Golden Temple and the Wagah border ceremony."
    },
    {
        "id": "kochi",
        "name": "Kochi",
        "region": "Kerala",
        "category": "city",
        "cost_factor": 1.1,
        "popularity": 8,
        "description": "Chinese fishing nets, spice markets and backwater gateways."
    }
]
