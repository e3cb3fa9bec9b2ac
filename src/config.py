# config.py

LOG_FILE                                = "../data/logs/log.log"
LOG_LEVEL                               = "INFO"    # Options: DEBUG, INFO, WARNING, ERROR, CRITICAL

# imafia.org tournament pages
IMAFIA_URL_BASE                         = "https://imafia.org/tournament"
IMAFIA_URL_TAIL                         = "#tournament-info"
SCRAPE_TOURNAMENT_ID                    = "740"     # Default tournament to scrape when none is given on the command line
SCRAPE_SEAT_SELECTOR                    = (
    "#tournament-results > div > div > div > div > div.games_item_content > div > div > a:not(:empty)"
)

SEATS_PER_TABLE                         = 10        # Standard mafia table size

REQUEST_TIMEOUT                         = 20        # Seconds per HTTP request
REQUEST_RETRIES                         = 3         # Retries on 429/5xx before giving up
REQUEST_BACKOFF                         = 1         # Backoff factor: waits 1s, 2s, 4s between retries
