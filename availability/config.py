import os

from dotenv import load_dotenv

load_dotenv()


class Config:
    AVAILABILITY_SUMMARY_MIN_RESPONSES = int(
        os.getenv("AVAILABILITY_SUMMARY_MIN_RESPONSES", "100")
    )
    AVAILABILITY_LOG_LEVEL = os.getenv("AVAILABILITY_LOG_LEVEL", "WARNING").upper()
