"""
Configuration settings for the creational factories.

Loads settings from environment variables with sensible defaults.
"""

import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Variant used by the abstract-factory bootstrap ("1" or "2")
FACTORY_VARIANT = os.getenv("FACTORY_VARIANT", "1")

# Creator used by the factory-method bootstrap ("1" or "2")
CREATOR_NAME = os.getenv("CREATOR_NAME", "1")

# Reject cross-variant collaboration instead of labelling it
STRICT_VARIANTS = os.getenv("STRICT_VARIANTS", "false").lower() == "true"

# Pooled creator
POOL_MAX_SIZE = int(os.getenv("POOL_MAX_SIZE", "4"))

# Logging Configuration
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")


if __name__ == "__main__":
    # Print configuration for debugging
    print("=== Creational Factories Configuration ===")
    print(f"Factory Variant: {FACTORY_VARIANT}")
    print(f"Creator: {CREATOR_NAME}")
    print(f"Strict Variants: {STRICT_VARIANTS}")
    print(f"Pool Max Size: {POOL_MAX_SIZE}")
    print(f"Log Level: {LOG_LEVEL}")
