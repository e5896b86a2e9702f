"""
Tour of the elliptic, split and hyperbolic algebras.

Shows products, zero divisors, degenerate division, nilpotents and
curvilinear coordinates side by side.
"""
import torch

from hyperquat import QuaternionAlgebra, DegenerateDivisionError
from hyperquat.utils import AlgebraConfig


def demo_products(algebras):
    print("\n" + "="*60)
    print("Products")
    print("="*60)
    for algebra in algebras:
        x = algebra.new(1, 2, 3, 4)
        y = algebra.new(5, 6, 7, 8)
        print(f"{algebra.name:>10}: {x} * {y} = {x * y}")
        e1, e2, e3 = algebra.units()
        print(f"{'':>10}  e1² = {e1 * e1}, e1e2 = {e1 * e2}, e2e3 = {e2 * e3}")


def demo_division(algebras):
    print("\n" + "="*60)
    print("Quadrance and Division")
    print("="*60)
    for algebra in algebras:
        z = algebra.new(1, 0, 1, 0)
        print(f"{algebra.name:>10}: Q({z}) = {z.quadrance().item():g}")
        try:
            print(f"{'':>10}  inverse = {z.inverse()}")
        except DegenerateDivisionError as e:
            print(f"{'':>10}  {e}")


def demo_nilpotent(split):
    print("\n" + "="*60)
    print("Nilpotents")
    print("="*60)
    z = split.new(0, 1, 1, 0)
    print(f"{z}² = {z * z}, nilpotent: {bool(split.is_nilpotent(z))}")


def demo_coordinates(algebras):
    print("\n" + "="*60)
    print("Curvilinear Coordinates")
    print("="*60)
    gen = torch.Generator().manual_seed(0)
    for algebra in algebras:
        z = algebra.random(generator=gen)
        coords = z.curvilinear()
        back = algebra.rect(*coords)
        print(f"{algebra.name:>10}: {z}")
        print(f"{'':>10}  {coords}")
        print(f"{'':>10}  round trip equal: {bool(back.equals(z))}")


def main():
    algebras = [
        QuaternionAlgebra.from_config(AlgebraConfig(signature=name))
        for name in ('hamilton', 'cockle', 'macfarlane')
    ]

    demo_products(algebras)
    demo_division(algebras)
    demo_nilpotent(algebras[1])
    demo_coordinates(algebras)

    print("\nDone!")

if __name__ == "__main__":
    main()
