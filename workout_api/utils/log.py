import logging
import os
import sys

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG").upper()
FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# force=True drops any handlers uvicorn or pytest installed before us
logging.basicConfig(level=LOG_LEVEL, format=FORMAT, stream=sys.stdout, force=True)

# Per-request chatter from the server and the test client
for name in ("uvicorn.access", "httpx", "multipart"):
    logging.getLogger(name).setLevel(logging.INFO)

logger = logging.getLogger("workout_api")
logger.setLevel(LOG_LEVEL)

logger.debug(f"Logger initialised level={LOG_LEVEL}")
