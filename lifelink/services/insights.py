from geopy.distance import geodesic

HEATMAP_AREAS = [
    {'id': 1, 'area': 'Downtown', 'lat': 40.7589, 'lng': -73.9851, 'density': 85, 'donors': 342},
    {'id': 2, 'area': 'Midtown', 'lat': 40.7505, 'lng': -73.9934, 'density': 92, 'donors': 428},
    {'id': 3, 'area': 'Upper East Side', 'lat': 40.7736, 'lng': -73.9566, 'density': 78, 'donors': 298},
    {'id': 4, 'area': 'Brooklyn Heights', 'lat': 40.6962, 'lng': -73.9969, 'density': 65, 'donors': 234},
    {'id': 5, 'area': 'Queens', 'lat': 40.7282, 'lng': -73.7949, 'density': 58, 'donors': 189},
    {'id': 6, 'area': 'Bronx', 'lat': 40.8448, 'lng': -73.8648, 'density': 45, 'donors': 156},
    {'id': 7, 'area': 'Staten Island', 'lat': 40.5795, 'lng': -74.1502, 'density': 38, 'donors': 98},
    {'id': 8, 'area': 'Financial District', 'lat': 40.7074, 'lng': -74.0113, 'density': 72, 'donors': 267},
]

SITE_STATISTICS = [
    {'title': 'Lives Saved', 'value': 150000, 'suffix': '+'},
    {'title': 'Partner Hospitals', 'value': 500, 'suffix': '+'},
    {'title': 'Active Donors', 'value': 75000, 'suffix': '+'},
    {'title': 'Emergency Responses', 'value': 24, 'suffix': '/7'},
    {'title': 'Blood Units Collected', 'value': 250000, 'suffix': '+'},
    {'title': 'Collection Centers', 'value': 1200, 'suffix': '+'},
    {'title': 'Annual Drives', 'value': 365, 'suffix': '+'},
    {'title': 'Years of Service', 'value': 15, 'suffix': '+'},
]


def density_band(density):
    if density >= 80:
        return 'high', '#ef4444'
    if density >= 60:
        return 'medium-high', '#f97316'
    if density >= 40:
        return 'medium', '#eab308'
    return 'low', '#22c55e'


def donor_heatmap(origin=None):
    """Areas with their density band; nearest first when an origin is given."""
    areas = []
    for area in HEATMAP_AREAS:
        band, color = density_band(area['density'])
        entry = dict(area, band=band, color=color)
        if origin is not None:
            miles = geodesic(origin, (area['lat'], area['lng'])).miles
            entry['distanceMiles'] = round(miles, 2)
        areas.append(entry)

    if origin is not None:
        areas.sort(key=lambda a: a['distanceMiles'])
    return {
        'areas': areas,
        'totalDonors': sum(area['donors'] for area in HEATMAP_AREAS),
        'maxDensity': max(area['density'] for area in HEATMAP_AREAS),
    }


def site_statistics():
    return [dict(stat, display=f"{stat['value']:,}{stat['suffix']}") for stat in SITE_STATISTICS]
