from kselect.kstypes import IndexArray


class InvalidArgument(ValueError):
    pass


def identity_permutation(m: int) -> IndexArray:
    return list(range(m))


def check_types(n, k) -> None:
    for name, value in (("n", n), ("k", k)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(
                f"{name} must be an int, not {type(value).__name__}"
            )


def check_domain(n, k) -> None:
    """
    Validate the (n, k) pair shared by every generator. Raises TypeError
    for non-integers and InvalidArgument unless n >= 1 and 0 <= k <= n.
    """
    check_types(n, k)
    if n < 1:
        raise InvalidArgument(f"need at least 1 element, got n={n}")
    if k < 0 or k > n:
        raise InvalidArgument(f"need 0 <= k <= n, got n={n}, k={k}")


def binomial(n: int, k: int) -> int:
    if k < 0 or k > n:
        return 0
    count = 1
    # count * (n - i) is always divisible by (i + 1) here
    for i in range(k):
        count = count * (n - i) // (i + 1)
    return count


def permutation_count(n: int, k: int) -> int:
    if k < 0 or k > n:
        return 0
    count = 1
    for i in range(n - k + 1, n + 1):
        count *= i
    return count
