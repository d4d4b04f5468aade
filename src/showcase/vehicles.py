"""Vehicles — композиция: Car содержит Engine."""

from dataclasses import dataclass, field
from typing import List


@dataclass
class Engine:
    type: str
    horsepower: int
    running: bool = False

    def start(self) -> str:
        self.running = True
        return f"Engine ({self.type}, {self.horsepower}HP) started"

    def stop(self) -> str:
        self.running = False
        return "Engine stopped"


@dataclass
class Car:
    model: str
    year: int
    engine: Engine = field(default_factory=lambda: Engine("I4", 150))

    @classmethod
    def build(cls, model: str, year: int, engine_type: str, horsepower: int) -> "Car":
        """Машина со своим двигателем заданного типа и мощности."""
        if horsepower <= 0:
            raise ValueError(f"horsepower {horsepower} must be positive")
        return cls(model=model, year=year, engine=Engine(engine_type, horsepower))

    @property
    def running(self) -> bool:
        return self.engine.running

    def start(self) -> List[str]:
        return [f"Starting {self.year} {self.model}...", self.engine.start(), "Car is ready to drive!"]

    def stop(self) -> List[str]:
        return [f"Stopping {self.model}...", self.engine.stop(), "Car stopped."]
