import os
from dotenv import load_dotenv

load_dotenv()

class BaseConfig:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret")
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # Public origin used to absolutize links in the storefront and the feed
    STOREFRONT_BASE_URL = os.getenv("STOREFRONT_BASE_URL", "http://localhost:5000")
    STOREFRONT_GRID_LIMIT = int(os.getenv("STOREFRONT_GRID_LIMIT", "8"))
    STOREFRONT_GRID_MAX_LIMIT = int(os.getenv("STOREFRONT_GRID_MAX_LIMIT", "100"))

    FEED_CURRENCY = os.getenv("FEED_CURRENCY", "BDT")
    FEED_BRAND = os.getenv("FEED_BRAND", "LUNAVEIL")
    FEED_PRODUCT_CATEGORY = os.getenv("FEED_PRODUCT_CATEGORY", "1604")

class DevelopmentConfig(BaseConfig):
    DEBUG = True
    SQLALCHEMY_DATABASE_URI = os.getenv("DEV_DATABASE_URI", "sqlite:///storefront-dev.db")

class TestingConfig(BaseConfig):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    STOREFRONT_BASE_URL = "https://shop.example.com"

class ProductionConfig(BaseConfig):
    DEBUG = False
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URI")

config_by_name = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig
}
