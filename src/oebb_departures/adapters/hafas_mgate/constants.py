"""Constants for the ÖBB HAFAS mgate adapter.

mgate.exe is the JSON trip-planning endpoint behind the ÖBB web planner.
It requires an access id ("aid") which must be supplied out-of-band via the
HAFAS_AID environment variable and is never committed.
"""

MGATE_URL = "https://fahrplan.oebb.at/bin/mgate.exe"
MGATE_SOURCE_NAME = "oebb-hafas-mgate"

MGATE_LANG = "deu"
MGATE_VERSION = "1.61"
MGATE_EXT = "OEBB.1"
MGATE_CLIENT = {"id": "OEBB", "type": "WEB", "name": "webapp", "v": "1.0"}

# Include every product class (16 bits)
ALL_PRODUCTS_FILTER = "1111111111111111"
NUM_CONNECTIONS = 5

# mgate reports success per service result with err == "OK"
SERVICE_OK = "OK"
