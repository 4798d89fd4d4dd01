"""
Unit enum GraphQL type definitions
"""

import strawberry

from ... import units

HeightUnit = strawberry.enum(units.HeightUnit, description="Units a height can be expressed in.")
WeightUnit = strawberry.enum(units.WeightUnit, description="Units a weight can be expressed in.")
