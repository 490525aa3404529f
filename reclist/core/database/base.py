# File: reclist/core/database/base.py

from sqlalchemy.orm import declarative_base

# The shared registry. All feature models inherit from this.
Base = declarative_base()
