"""Constants for the REST journey sources.

The transport.rest APIs (https://v6.db.transport.rest/api.html) are public and
need no authentication; the published rate limit is 100 requests/minute.
Scotty's query.exe JSON output and the macistry mirror follow the same
journeys/legs shape closely enough to share one extractor.

URL templates accept the placeholders {from_id}, {to_id}, {from_name},
{to_name} (URL-encoded), {date} (YYYYMMDD) and {time} (HHMM).
"""

SCOTTY_QUERY_URL = (
    "https://fahrplan.oebb.at/bin/query.exe/dny"
    "?S={from_name}&Z={to_name}&date={date}&time={time}&start=1"
    "&prod=1111111111111111&REQ0JourneyStopsS0A=1&REQ0JourneyStopsZ0A=1&output=json"
)
DB_REST_V6_JOURNEYS_URL = "https://v6.db.transport.rest/journeys?from={from_id}&to={to_id}&results=5"
MACISTRY_JOURNEYS_URL = "https://oebb.macistry.com/api/journeys?from={from_id}&to={to_id}"
DB_REST_V5_JOURNEYS_URL = "https://v5.db.transport.rest/journeys?from={from_id}&to={to_id}&results=5"

# (source name, URL template) in priority order
DEFAULT_REST_CHAIN = [
    ("oebb-scotty-query", SCOTTY_QUERY_URL),
    ("db-transport-rest-v6", DB_REST_V6_JOURNEYS_URL),
    ("oebb-macistry", MACISTRY_JOURNEYS_URL),
    ("db-transport-rest-v5", DB_REST_V5_JOURNEYS_URL),
]

# Top-level keys that hold the journey list
JOURNEY_LIST_KEYS = ("journeys", "routes")
