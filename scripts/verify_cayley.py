"""Re-derive the Cayley table of every signature and find discrepancies."""
import torch

from hyperquat.algebra.signature import SIGNATURES, cayley_table
from hyperquat.algebra.value import Quaternion, multiply, unit
from hyperquat.algebra.paired import paired_multiply

# Index: 0:s, 1:e1, 2:e2, 3:e3


def expanded_product(signature, p, q):
    """Closed-form 4x4 expansion built only from unit squares and cyclic coefficients."""
    q1, q2, q3 = signature.squares
    c1, c2, c3 = signature.cyclic
    return [
        p[0] * q[0] + q1 * p[1] * q[1] + q2 * p[2] * q[2] + q3 * p[3] * q[3],
        p[0] * q[1] + p[1] * q[0] + c1 * (p[2] * q[3] - p[3] * q[2]),
        p[0] * q[2] + p[2] * q[0] + c2 * (p[3] * q[1] - p[1] * q[3]),
        p[0] * q[3] + p[3] * q[0] + c3 * (p[1] * q[2] - p[2] * q[1]),
    ]


errors = []

for signature in SIGNATURES:
    signs, indices = cayley_table(signature)
    print(f"{signature.name}: squares={signature.squares} cyclic={signature.cyclic}")

    # Basis products against the expansion
    for i in range(4):
        for j in range(4):
            ei = [1.0 if n == i else 0.0 for n in range(4)]
            ej = [1.0 if n == j else 0.0 for n in range(4)]
            expected = expanded_product(signature, ei, ej)
            k = int(indices[i, j].item())
            s = signs[i, j].item()
            for n, v in enumerate(expected):
                want = s if n == k else 0.0
                if v != want:
                    errors.append((signature.name, i, j, n, v, want))

    # Anti-commutation of distinct units
    for i in range(1, 4):
        for j in range(1, 4):
            if i != j:
                ij = multiply(unit(i, signature), unit(j, signature))
                ji = multiply(unit(j, signature), unit(i, signature))
                if not bool(ij.equals(-ji)):
                    errors.append((signature.name, i, j, 'anti-commutation'))

    # Paired identity on random inputs
    if signature.has_paired_form:
        gen = torch.Generator().manual_seed(0)
        x = Quaternion(torch.randn(1000, 4, generator=gen, dtype=torch.float64), signature)
        y = Quaternion(torch.randn(1000, 4, generator=gen, dtype=torch.float64), signature)
        agree = multiply(x, y).equals(paired_multiply(x, y))
        if not bool(agree.all()):
            errors.append((signature.name, 'paired', int((~agree).sum().item())))

print()
if errors:
    print(f"Found {len(errors)} discrepancies:")
    for e in errors:
        print(f"  {e}")
else:
    print("All Cayley tables consistent.")
