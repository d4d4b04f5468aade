"""Showcase — небольшие модели объектно-ориентированных приёмов.

- shapes: tagged union фигур, полиморфное ценообразование, счётчик операций
- animals: наследование, capability-протоколы, фабрика по тегу
- vehicles: композиция Car / Engine
"""

from .animals import (
    Animal,
    AnimalFactory,
    Bird,
    Cat,
    Dog,
    Duck,
    Eagle,
    FlightBehavior,
    Flyable,
    GenericAnimal,
    SwimBehavior,
    Swimmable,
)
from .shapes import (
    AreaCalculator,
    Circle,
    Rectangle,
    Shape,
    ShapePricer,
    ShapeQuote,
    describe,
    parse_shape,
)
from .vehicles import Car, Engine

__all__ = [
    # Shapes
    "Circle",
    "Rectangle",
    "Shape",
    "ShapePricer",
    "ShapeQuote",
    "AreaCalculator",
    "describe",
    "parse_shape",
    # Animals
    "Animal",
    "Dog",
    "Cat",
    "GenericAnimal",
    "Eagle",
    "Duck",
    "Bird",
    "Flyable",
    "Swimmable",
    "FlightBehavior",
    "SwimBehavior",
    "AnimalFactory",
    # Vehicles
    "Car",
    "Engine",
]
