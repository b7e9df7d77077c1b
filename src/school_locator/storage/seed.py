"""Fixed school locations inserted the first time a store is initialized."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SeedSchool:
    name: str
    latitude: float
    longitude: float
    city: str | None = None
    state: str | None = None


# Sample coordinates, one school per city
SEED_SCHOOLS: tuple[SeedSchool, ...] = (
    SeedSchool("Lincoln High School", 34.052235, -118.243683, "Los Angeles", "CA"),
    SeedSchool("Roosevelt High School", 40.712776, -74.005974, "New York", "NY"),
    SeedSchool("Washington High School", 41.878113, -87.629799, "Chicago", "IL"),
    SeedSchool("Jefferson High School", 29.760427, -95.369804, "Houston", "TX"),
    SeedSchool("Franklin High School", 33.448376, -112.074036, "Phoenix", "AZ"),
    SeedSchool("Madison High School", 39.739236, -104.990251, "Denver", "CO"),
    SeedSchool("Hamilton High School", 47.606209, -122.332069, "Seattle", "WA"),
    SeedSchool("Adams High School", 32.776665, -96.796989, "Dallas", "TX"),
    SeedSchool("Kennedy High School", 37.774929, -122.419418, "San Francisco", "CA"),
    SeedSchool("Grant High School", 45.512230, -122.658722, "Portland", "OR"),
    SeedSchool("Central High School", 39.952583, -75.165222, "Philadelphia", "PA"),
    SeedSchool("Northview High School", 33.749001, -84.387978, "Atlanta", "GA"),
    SeedSchool("Westview High School", 32.715736, -117.161087, "San Diego", "CA"),
    SeedSchool("Eastview High School", 25.761681, -80.191788, "Miami", "FL"),
    SeedSchool("Southridge High School", 38.627003, -90.199402, "St. Louis", "MO"),
    SeedSchool("Riverside High School", 42.360081, -71.058884, "Boston", "MA"),
    SeedSchool("Maple Grove High School", 44.977753, -93.265015, "Minneapolis", "MN"),
    SeedSchool("Oak Ridge High School", 36.162663, -86.781601, "Nashville", "TN"),
    SeedSchool("Pinecrest High School", 35.227085, -80.843124, "Charlotte", "NC"),
    SeedSchool("Cedar Valley High School", 39.768402, -86.158066, "Indianapolis", "IN"),
    SeedSchool("Hillside High School", 29.424122, -98.493629, "San Antonio", "TX"),
    SeedSchool("Lakeside High School", 39.103119, -84.512016, "Cincinnati", "OH"),
    SeedSchool("Valley View High School", 36.169941, -115.139832, "Las Vegas", "NV"),
    SeedSchool("Summit High School", 45.815010, -122.678452, "Vancouver", "WA"),
    SeedSchool("Brookside High School", 43.653225, -79.383186, "Toronto", "ON"),
)
