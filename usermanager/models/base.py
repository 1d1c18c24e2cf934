"""Declarative base for database models"""
from sqlalchemy.orm import declarative_base

Base = declarative_base()
