import os
import logging

from movie_proxy import Settings, create_app

# ----------------------
# Configuration
# ----------------------
PORT = int(os.getenv("PORT", "8080"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Logging
logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger("movie-proxy")

# ----------------------
# App Setup
# ----------------------
settings = Settings.from_env()
app = create_app(settings)
logger.info("Proxying movie requests to %s", settings.api_base)

if __name__ == "__main__":
    app.run(host="0.0.0.0", port=PORT, threaded=True)
