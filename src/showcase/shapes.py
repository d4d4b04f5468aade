"""
Shapes — закрытый набор фигур (tagged union) и ценообразование по площади

Circle и Rectangle — immutable Pydantic модели с дискриминатором kind.
Shape = Circle | Rectangle; parse_shape() восстанавливает фигуру из dict.

ShapePricer принимает любую Shape (полиморфизм через общий метод area()).
AreaCalculator считает выполненные операции в своём экземпляре.
"""

import math
from dataclasses import dataclass
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, Field, TypeAdapter


# =============================================================================
# SHAPE MODELS
# =============================================================================


class Circle(BaseModel):
    """Круг"""

    kind: Literal["circle"] = "circle"
    radius: float = Field(..., gt=0, description="Радиус")
    color: str = Field(..., min_length=1, description="Цвет")

    model_config = {"frozen": True}

    @property
    def name(self) -> str:
        return "Circle"

    def area(self) -> float:
        return math.pi * self.radius * self.radius

    def circumference(self) -> float:
        return 2 * math.pi * self.radius

    def repaint(self, color: str) -> "Circle":
        """Новый экземпляр другого цвета"""
        return self.model_copy(update={"color": color})


class Rectangle(BaseModel):
    """Прямоугольник"""

    kind: Literal["rectangle"] = "rectangle"
    width: float = Field(..., gt=0, description="Ширина")
    height: float = Field(..., gt=0, description="Высота")
    color: str = Field(..., min_length=1, description="Цвет")

    model_config = {"frozen": True}

    @property
    def name(self) -> str:
        return "Rectangle"

    def area(self) -> float:
        return self.width * self.height

    def is_square(self) -> bool:
        return self.width == self.height

    def repaint(self, color: str) -> "Rectangle":
        """Новый экземпляр другого цвета"""
        return self.model_copy(update={"color": color})


Shape = Annotated[Union[Circle, Rectangle], Field(discriminator="kind")]

_SHAPE_ADAPTER: TypeAdapter = TypeAdapter(Shape)


def parse_shape(data: dict[str, Any]) -> Union[Circle, Rectangle]:
    """
    Восстановление фигуры из dict по полю kind.

    Raises:
        pydantic.ValidationError: Неизвестный kind или невалидные размеры
    """
    return _SHAPE_ADAPTER.validate_python(data)


def describe(shape: Union[Circle, Rectangle]) -> str:
    """'This is a red Circle'"""
    return f"This is a {shape.color} {shape.name}"


# =============================================================================
# PRICING
# =============================================================================


@dataclass(frozen=True)
class ShapeQuote:
    """Расчёт стоимости фигуры по площади."""

    shape_name: str
    area: float
    price_per_unit: float
    total: float


class ShapePricer:
    """Стоимость покраски/изготовления любой фигуры: area * price_per_unit."""

    def quote(self, shape: Union[Circle, Rectangle], price_per_unit: float) -> ShapeQuote:
        if price_per_unit < 0:
            raise ValueError(f"price_per_unit {price_per_unit} cannot be negative")
        area = shape.area()
        return ShapeQuote(
            shape_name=shape.name,
            area=area,
            price_per_unit=price_per_unit,
            total=area * price_per_unit,
        )


# =============================================================================
# AREA CALCULATOR
# =============================================================================


class AreaCalculator:
    """Калькулятор площадей со счётчиком выполненных операций."""

    def __init__(self):
        self.operation_count = 0

    def circle_area(self, radius: float) -> float:
        self.operation_count += 1
        return math.pi * radius * radius

    def rectangle_area(self, width: float, height: float) -> float:
        self.operation_count += 1
        return width * height
