import logging

import uvicorn
from grocer.api.api_run import app
from grocer.utilities.config import APP_HOST, APP_PORT, LOG_LEVEL
from grocer.utilities.network import server_urls


def main():
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    urls = server_urls(APP_PORT)
    # Print a friendly message that points to the URL you can open in a browser
    print(f"Uvicorn running on {urls[0]} (Press CTRL+C to quit)")
    # Also show the LAN-accessible URL for other devices on the same network
    for lan_url in urls[1:]:
        print(f"Accessible from other devices at: {lan_url}")
    uvicorn.run(app, host=APP_HOST, port=APP_PORT, log_level=LOG_LEVEL.lower())


if __name__ == "__main__":
    main()
