"""Pydantic schemas for the dashboard nutrition chart."""
import datetime as dt

from pydantic import BaseModel


class MacrosSchema(BaseModel):
    protein: int
    carbs: int
    fats: int


class MicrosSchema(BaseModel):
    vitamins: int
    minerals: int
    fiber: int


class DailyIntakeSchema(BaseModel):
    date: dt.date
    macros: MacrosSchema
    micros: MicrosSchema
