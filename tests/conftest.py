"""Pin settings for the test run before any storefront module reads them."""

import os

os.environ["APP_ENV"] = "dev"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET"] = "test-secret-not-for-production"
os.environ["JWT_ALGORITHM"] = "HS256"
# Lowest cost bcrypt accepts; keeps hashing fast across many signups.
os.environ["BCRYPT_ROUNDS"] = "4"
