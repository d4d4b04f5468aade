"""
Animals — наследование, capability-интерфейсы и фабрика по тегу

- Animal: базовый класс (eat / sleep / make_sound), Dog и Cat наследуют его
- Flyable / Swimmable: протоколы возможностей; реализуются композицией
  с маленькими объектами поведения (FlightBehavior, SwimBehavior),
  без множественного наследования
- Bird реализует Flyable, не являясь Animal
- AnimalFactory: тег → конструктор, неизвестный тег → GenericAnimal

Все методы возвращают строки, вывод — забота вызывающего.
"""

from dataclasses import dataclass, field
from typing import Callable, Dict, Protocol, runtime_checkable


# =============================================================================
# CAPABILITIES
# =============================================================================


@runtime_checkable
class Flyable(Protocol):
    def fly(self) -> str: ...

    def land(self) -> str: ...


@runtime_checkable
class Swimmable(Protocol):
    def swim(self) -> str: ...


@dataclass(frozen=True)
class FlightBehavior:
    """Шаблоны полёта и посадки, {name} подставляется владельцем."""

    fly_template: str = "{name} is flying high!"
    land_template: str = "{name} is landing gracefully."

    def fly(self, name: str) -> str:
        return self.fly_template.format(name=name)

    def land(self, name: str) -> str:
        return self.land_template.format(name=name)


@dataclass(frozen=True)
class SwimBehavior:
    swim_template: str = "{name} is swimming in the water."

    def swim(self, name: str) -> str:
        return self.swim_template.format(name=name)


# =============================================================================
# ANIMALS
# =============================================================================


@dataclass
class Animal:
    """Базовое животное."""

    name: str
    age: int = 0

    def eat(self) -> str:
        return f"{self.name} is eating."

    def sleep(self) -> str:
        return f"{self.name} is sleeping."

    def make_sound(self) -> str:
        return f"{self.name} makes a sound."


@dataclass
class Dog(Animal):
    breed: str = "mixed"

    def make_sound(self) -> str:
        return f"{self.name} barks: Woof!"

    def fetch(self) -> str:
        return f"{self.name} is fetching the ball."


@dataclass
class Cat(Animal):
    def make_sound(self) -> str:
        return f"{self.name} says: Meow!"


@dataclass
class GenericAnimal(Animal):
    def make_sound(self) -> str:
        return f"{self.name} makes a generic animal sound."


@dataclass
class Eagle(Animal):
    flight: FlightBehavior = field(
        default_factory=lambda: FlightBehavior(
            "{name} soars through the sky!", "{name} perches on a branch."
        )
    )

    def make_sound(self) -> str:
        return f"{self.name} screeches: Scree!"

    def fly(self) -> str:
        return self.flight.fly(self.name)

    def land(self) -> str:
        return self.flight.land(self.name)


@dataclass
class Duck(Animal):
    flight: FlightBehavior = field(
        default_factory=lambda: FlightBehavior(
            "{name} flies low over the pond.", "{name} splashes into the water."
        )
    )
    swimming: SwimBehavior = field(default_factory=SwimBehavior)

    def make_sound(self) -> str:
        return f"{self.name} quacks: Quack!"

    def fly(self) -> str:
        return self.flight.fly(self.name)

    def land(self) -> str:
        return self.flight.land(self.name)

    def swim(self) -> str:
        return self.swimming.swim(self.name)


@dataclass
class Bird:
    """Летает, но не Animal: реализует только Flyable."""

    name: str
    flight: FlightBehavior = field(default_factory=FlightBehavior)

    def fly(self) -> str:
        return self.flight.fly(self.name)

    def land(self) -> str:
        return self.flight.land(self.name)

    def chirp(self) -> str:
        return f"{self.name} chirps: Tweet!"


# =============================================================================
# FACTORY
# =============================================================================


class AnimalFactory:
    """Фабрика животных по тегу.

    Теги регистронезависимы. Неизвестный тег → GenericAnimal.
    """

    def __init__(self):
        self._constructors: Dict[str, Callable[[str], Animal]] = {
            "dog": Dog,
            "cat": Cat,
        }

    def register(self, tag: str, constructor: Callable[[str], Animal]) -> None:
        """Регистрация (или замена) конструктора для тега."""
        self._constructors[tag.lower()] = constructor

    def create(self, tag: str, name: str) -> Animal:
        constructor = self._constructors.get(tag.lower(), GenericAnimal)
        return constructor(name)

    @property
    def tags(self) -> list[str]:
        return sorted(self._constructors)
