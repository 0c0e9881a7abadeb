#!/usr/bin/env python3
"""
India district and sub-zone reference data
"""

# Fallback map center (geographic center of India) when a district is unknown
INDIA_CENTER = (22.5, 82.0)

# District registry table: key -> name, center, population
DISTRICTS = {
    "pune": {"name": "Pune", "lat": 18.5204, "lng": 73.8567, "population": 9429408},
    "mumbai": {"name": "Mumbai", "lat": 19.076, "lng": 72.8777, "population": 20411274},
    "chennai": {"name": "Chennai", "lat": 13.0827, "lng": 80.2707, "population": 10971108},
    "kolkata": {"name": "Kolkata", "lat": 22.5726, "lng": 88.3639, "population": 14850066},
    "delhi": {"name": "Delhi", "lat": 28.7041, "lng": 77.1025, "population": 19814000},
    "bengaluru": {"name": "Bengaluru", "lat": 12.9716, "lng": 77.5946, "population": 12764935},
    "hyderabad": {"name": "Hyderabad", "lat": 17.385, "lng": 78.4867, "population": 10534418},
    "ahmedabad": {"name": "Ahmedabad", "lat": 23.0225, "lng": 72.5714, "population": 8059441},
    "jaipur": {"name": "Jaipur", "lat": 26.9124, "lng": 75.7873, "population": 6626178},
    "guwahati": {"name": "Guwahati", "lat": 26.1445, "lng": 91.7362, "population": 1116267},
}


def _quad(lat, lng, dlat=0.012, dlng=0.014):
    """Four-vertex ring around a zone center (implicitly closed)."""
    return [
        (round(lat + dlat, 4), round(lng - dlng, 4)),
        (round(lat + dlat, 4), round(lng + dlng, 4)),
        (round(lat - dlat, 4), round(lng + dlng, 4)),
        (round(lat - dlat, 4), round(lng - dlng, 4)),
    ]


# Sub-zone catalogue per district.
# flood_risk / earthquake_risk: base risk score 0-100 for each hazard
# water: zone sits on a river bank, lake shore, wetland or low-lying drain
# urban: zone has dense, older building stock
ZONE_CATALOGUE = {
    "guwahati": [
        {"name": "Ganeshguri", "population": 185000, "flood_risk": 88, "earthquake_risk": 74,
         "coordinates": _quad(26.1503, 91.7780), "water": True, "urban": False},
        {"name": "Khanapara", "population": 142000, "flood_risk": 81, "earthquake_risk": 62,
         "coordinates": _quad(26.1197, 91.8179), "water": True, "urban": False},
        {"name": "Panjabari", "population": 98000, "flood_risk": 57, "earthquake_risk": 79,
         "coordinates": _quad(26.1376, 91.8060), "water": False, "urban": True},
        {"name": "Dispur", "population": 210000, "flood_risk": 69, "earthquake_risk": 86,
         "coordinates": _quad(26.1433, 91.7898), "water": False, "urban": True},
        {"name": "Paltan Bazaar", "population": 120000, "flood_risk": 73, "earthquake_risk": 70,
         "coordinates": _quad(26.1790, 91.7520), "water": False, "urban": False},
        {"name": "Jalukbari", "population": 76000, "flood_risk": 48, "earthquake_risk": 41,
         "coordinates": _quad(26.1550, 91.6640), "water": False, "urban": False},
    ],
    "pune": [
        {"name": "Central Pune", "population": 1250000, "flood_risk": 71, "earthquake_risk": 82,
         "coordinates": _quad(18.5196, 73.8553), "water": True, "urban": True},
        {"name": "Kothrud", "population": 640000, "flood_risk": 84, "earthquake_risk": 58,
         "coordinates": _quad(18.5074, 73.8077), "water": True, "urban": False},
        {"name": "Hinjewadi", "population": 410000, "flood_risk": 52, "earthquake_risk": 47,
         "coordinates": _quad(18.5912, 73.7389), "water": False, "urban": False},
        {"name": "Baner", "population": 380000, "flood_risk": 66, "earthquake_risk": 51,
         "coordinates": _quad(18.5590, 73.7868), "water": True, "urban": False},
        {"name": "Hadapsar", "population": 720000, "flood_risk": 61, "earthquake_risk": 55,
         "coordinates": _quad(18.5089, 73.9260), "water": False, "urban": True},
        {"name": "Kharadi", "population": 290000, "flood_risk": 44, "earthquake_risk": 39,
         "coordinates": _quad(18.5515, 73.9348), "water": False, "urban": False},
    ],
    "mumbai": [
        {"name": "Worli", "population": 520000, "flood_risk": 87, "earthquake_risk": 63,
         "coordinates": _quad(19.0176, 72.8170), "water": True, "urban": False},
        {"name": "Bandra", "population": 610000, "flood_risk": 79, "earthquake_risk": 67,
         "coordinates": _quad(19.0596, 72.8295), "water": True, "urban": False},
        {"name": "Dadar", "population": 480000, "flood_risk": 74, "earthquake_risk": 85,
         "coordinates": _quad(19.0178, 72.8478), "water": False, "urban": True},
        {"name": "Marine Lines", "population": 230000, "flood_risk": 82, "earthquake_risk": 72,
         "coordinates": _quad(18.9440, 72.8236), "water": True, "urban": True},
        {"name": "Andheri", "population": 1450000, "flood_risk": 76, "earthquake_risk": 60,
         "coordinates": _quad(19.1136, 72.8697), "water": False, "urban": True},
        {"name": "Powai", "population": 350000, "flood_risk": 58, "earthquake_risk": 45,
         "coordinates": _quad(19.1176, 72.9060), "water": True, "urban": False},
    ],
    "chennai": [
        {"name": "T. Nagar", "population": 450000, "flood_risk": 72, "earthquake_risk": 68,
         "coordinates": _quad(13.0418, 80.2341), "water": False, "urban": True},
        {"name": "Anna Salai", "population": 300000, "flood_risk": 63, "earthquake_risk": 71,
         "coordinates": _quad(13.0604, 80.2496), "water": False, "urban": True},
        {"name": "Velachery", "population": 520000, "flood_risk": 91, "earthquake_risk": 49,
         "coordinates": _quad(12.9815, 80.2180), "water": True, "urban": False},
        {"name": "Adyar", "population": 410000, "flood_risk": 83, "earthquake_risk": 53,
         "coordinates": _quad(13.0012, 80.2565), "water": True, "urban": False},
        {"name": "Tambaram", "population": 720000, "flood_risk": 69, "earthquake_risk": 42,
         "coordinates": _quad(12.9249, 80.1000), "water": True, "urban": False},
        {"name": "Anna Nagar", "population": 380000, "flood_risk": 47, "earthquake_risk": 56,
         "coordinates": _quad(13.0850, 80.2101), "water": False, "urban": False},
    ],
    "delhi": [
        {"name": "Karol Bagh", "population": 470000, "flood_risk": 54, "earthquake_risk": 83,
         "coordinates": _quad(28.6519, 77.1909), "water": False, "urban": True},
        {"name": "Lajpat Nagar", "population": 390000, "flood_risk": 61, "earthquake_risk": 76,
         "coordinates": _quad(28.5677, 77.2433), "water": False, "urban": True},
        {"name": "Connaught Place", "population": 150000, "flood_risk": 49, "earthquake_risk": 88,
         "coordinates": _quad(28.6315, 77.2167), "water": False, "urban": True},
        {"name": "Dwarka", "population": 1100000, "flood_risk": 58, "earthquake_risk": 64,
         "coordinates": _quad(28.5921, 77.0460), "water": False, "urban": False},
        {"name": "Mayur Vihar", "population": 560000, "flood_risk": 86, "earthquake_risk": 70,
         "coordinates": _quad(28.6090, 77.2950), "water": True, "urban": False},
        {"name": "Rohini", "population": 860000, "flood_risk": 42, "earthquake_risk": 66,
         "coordinates": _quad(28.7495, 77.0565), "water": False, "urban": True},
    ],
    "bengaluru": [
        {"name": "Whitefield", "population": 580000, "flood_risk": 62, "earthquake_risk": 38,
         "coordinates": _quad(12.9698, 77.7500), "water": False, "urban": False},
        {"name": "Indiranagar", "population": 310000, "flood_risk": 57, "earthquake_risk": 46,
         "coordinates": _quad(12.9784, 77.6408), "water": False, "urban": True},
        {"name": "Koramangala", "population": 420000, "flood_risk": 78, "earthquake_risk": 44,
         "coordinates": _quad(12.9352, 77.6245), "water": True, "urban": False},
        {"name": "MG Road", "population": 120000, "flood_risk": 51, "earthquake_risk": 53,
         "coordinates": _quad(12.9756, 77.6050), "water": False, "urban": True},
        {"name": "Bellandur", "population": 270000, "flood_risk": 89, "earthquake_risk": 35,
         "coordinates": _quad(12.9260, 77.6762), "water": True, "urban": False},
        {"name": "Yelahanka", "population": 340000, "flood_risk": 39, "earthquake_risk": 33,
         "coordinates": _quad(13.1005, 77.5963), "water": False, "urban": False},
    ],
    "hyderabad": [
        {"name": "Banjara Hills", "population": 290000, "flood_risk": 46, "earthquake_risk": 52,
         "coordinates": _quad(17.4126, 78.4482), "water": False, "urban": False},
        {"name": "Hitech City", "population": 360000, "flood_risk": 55, "earthquake_risk": 48,
         "coordinates": _quad(17.4435, 78.3772), "water": False, "urban": False},
        {"name": "Secunderabad", "population": 540000, "flood_risk": 74, "earthquake_risk": 59,
         "coordinates": _quad(17.4399, 78.4983), "water": True, "urban": True},
        {"name": "Charminar", "population": 680000, "flood_risk": 68, "earthquake_risk": 77,
         "coordinates": _quad(17.3616, 78.4747), "water": False, "urban": True},
        {"name": "LB Nagar", "population": 470000, "flood_risk": 81, "earthquake_risk": 43,
         "coordinates": _quad(17.3457, 78.5522), "water": True, "urban": False},
        {"name": "Kukatpally", "population": 610000, "flood_risk": 63, "earthquake_risk": 50,
         "coordinates": _quad(17.4849, 78.4138), "water": False, "urban": True},
    ],
    "kolkata": [
        {"name": "Park Street", "population": 260000, "flood_risk": 66, "earthquake_risk": 73,
         "coordinates": _quad(22.5518, 88.3522), "water": False, "urban": True},
        {"name": "Salt Lake", "population": 420000, "flood_risk": 80, "earthquake_risk": 61,
         "coordinates": _quad(22.5867, 88.4171), "water": True, "urban": False},
        {"name": "Howrah", "population": 1080000, "flood_risk": 85, "earthquake_risk": 78,
         "coordinates": _quad(22.5958, 88.2636), "water": True, "urban": True},
        {"name": "Dumdum", "population": 510000, "flood_risk": 71, "earthquake_risk": 57,
         "coordinates": _quad(22.6420, 88.4312), "water": False, "urban": False},
        {"name": "Behala", "population": 690000, "flood_risk": 77, "earthquake_risk": 54,
         "coordinates": _quad(22.4986, 88.3109), "water": True, "urban": False},
        {"name": "New Town", "population": 330000, "flood_risk": 59, "earthquake_risk": 48,
         "coordinates": _quad(22.5765, 88.4795), "water": False, "urban": False},
    ],
    "ahmedabad": [
        {"name": "Maninagar", "population": 520000, "flood_risk": 67, "earthquake_risk": 72,
         "coordinates": _quad(22.9962, 72.6030), "water": False, "urban": True},
        {"name": "Navrangpura", "population": 340000, "flood_risk": 58, "earthquake_risk": 81,
         "coordinates": _quad(23.0365, 72.5611), "water": True, "urban": True},
        {"name": "Bodakdev", "population": 210000, "flood_risk": 43, "earthquake_risk": 64,
         "coordinates": _quad(23.0395, 72.5090), "water": False, "urban": False},
        {"name": "Satellite", "population": 280000, "flood_risk": 49, "earthquake_risk": 69,
         "coordinates": _quad(23.0300, 72.5176), "water": False, "urban": False},
        {"name": "Vasna", "population": 300000, "flood_risk": 79, "earthquake_risk": 55,
         "coordinates": _quad(22.9979, 72.5496), "water": True, "urban": False},
        {"name": "Naroda", "population": 450000, "flood_risk": 52, "earthquake_risk": 60,
         "coordinates": _quad(23.0685, 72.6536), "water": False, "urban": True},
    ],
    "jaipur": [
        {"name": "Pink City", "population": 470000, "flood_risk": 62, "earthquake_risk": 76,
         "coordinates": _quad(26.9239, 75.8267), "water": False, "urban": True},
        {"name": "Malviya Nagar", "population": 380000, "flood_risk": 57, "earthquake_risk": 54,
         "coordinates": _quad(26.8530, 75.8047), "water": False, "urban": False},
        {"name": "Vaishali Nagar", "population": 330000, "flood_risk": 48, "earthquake_risk": 51,
         "coordinates": _quad(26.9117, 75.7437), "water": False, "urban": False},
        {"name": "Mansarovar", "population": 520000, "flood_risk": 69, "earthquake_risk": 59,
         "coordinates": _quad(26.8687, 75.7597), "water": True, "urban": True},
        {"name": "Sanganer", "population": 410000, "flood_risk": 64, "earthquake_risk": 45,
         "coordinates": _quad(26.8220, 75.7870), "water": True, "urban": False},
        {"name": "Amer", "population": 120000, "flood_risk": 41, "earthquake_risk": 63,
         "coordinates": _quad(26.9855, 75.8513), "water": True, "urban": False},
    ],
}

# Hazard-specific impact target areas per district.
# primary: the zone that leads the impact overlay among tagged zones
TARGET_AREAS = {
    "guwahati": {
        "flood": {"areas": ["Ganeshguri", "Khanapara", "Panjabari", "Dispur"], "primary": "Ganeshguri"},
        "earthquake": {"areas": ["Dispur", "Ganeshguri", "Panjabari", "Khanapara"], "primary": "Dispur"},
    },
    "pune": {
        "flood": {"areas": ["Kothrud", "Hinjewadi", "Baner", "Central Pune"], "primary": "Kothrud"},
        "earthquake": {"areas": ["Central Pune", "Kothrud", "Hinjewadi", "Baner"], "primary": "Central Pune"},
    },
    "mumbai": {
        "flood": {"areas": ["Worli", "Bandra", "Dadar", "Marine Lines"], "primary": "Worli"},
        "earthquake": {"areas": ["Dadar", "Bandra", "Worli", "Marine Lines"], "primary": "Dadar"},
    },
    "delhi": {
        "flood": {"areas": ["Karol Bagh", "Lajpat Nagar", "Connaught Place", "Dwarka"], "primary": None},
        "earthquake": {"areas": ["Connaught Place", "Karol Bagh", "Lajpat Nagar", "Dwarka"],
                       "primary": "Connaught Place"},
    },
    "chennai": {
        "flood": {"areas": ["T. Nagar", "Anna Salai", "Velachery", "Adyar"], "primary": "Velachery"},
        "earthquake": {"areas": ["Anna Salai", "T. Nagar", "Velachery", "Adyar"], "primary": "Anna Salai"},
    },
    "bengaluru": {
        "flood": {"areas": ["Whitefield", "Indiranagar", "Koramangala", "MG Road"], "primary": "Koramangala"},
        "earthquake": {"areas": ["MG Road", "Indiranagar", "Koramangala", "Whitefield"], "primary": "MG Road"},
    },
    "hyderabad": {
        "flood": {"areas": ["Banjara Hills", "Hitech City", "Secunderabad", "Charminar"],
                  "primary": "Secunderabad"},
        "earthquake": {"areas": ["Charminar", "Banjara Hills", "Hitech City", "Secunderabad"],
                       "primary": "Charminar"},
    },
    "kolkata": {
        "flood": {"areas": ["Park Street", "Salt Lake", "Howrah", "Dumdum"], "primary": "Howrah"},
        "earthquake": {"areas": ["Park Street", "Salt Lake", "Howrah", "Dumdum"], "primary": "Park Street"},
    },
    "ahmedabad": {
        "flood": {"areas": ["Maninagar", "Navrangpura", "Bodakdev", "Satellite"], "primary": "Navrangpura"},
        "earthquake": {"areas": ["Navrangpura", "Maninagar", "Bodakdev", "Satellite"],
                       "primary": "Navrangpura"},
    },
    "jaipur": {
        "flood": {"areas": ["Pink City", "Malviya Nagar", "Vaishali Nagar", "Mansarovar"],
                  "primary": "Mansarovar"},
        "earthquake": {"areas": ["Pink City", "Malviya Nagar", "Vaishali Nagar", "Mansarovar"],
                       "primary": "Pink City"},
    },
}

# SMS alert templates, {district} and {disaster_type} are filled at render time
ALERT_TEMPLATES = [
    {
        "id": "flood",
        "label": "Flood warning",
        "body": "[FLOOD ALERT] {district}. Heavy rain expected. Avoid low-lying areas. "
                "Move to higher ground. Stay tuned. - SentinelX",
    },
    {
        "id": "earthquake",
        "label": "Earthquake alert",
        "body": "[EARTHQUAKE ALERT] {district}. Seismic activity reported. Drop, cover, hold. "
                "Stay away from buildings. - SentinelX",
    },
    {
        "id": "evacuate",
        "label": "Evacuate immediately",
        "body": "[EVACUATE] {district} - {disaster_type}. Leave now. Follow official routes. "
                "Do not return until all-clear. - SentinelX",
    },
    {
        "id": "monitor",
        "label": "Monitor - no evacuation",
        "body": "[MONITOR] {district}. Situation under watch. No evacuation yet. Stay informed. - SentinelX",
    },
    {
        "id": "allclear",
        "label": "All-clear",
        "body": "[ALL-CLEAR] {district}. Threat passed. Follow local advisories for return. - SentinelX",
    },
]
