"""
Core domain models, number-theoretic primitives, and contracts.

Кольца и значения квадратичных целых, таксономия сбоев, проверка
native-диапазона и JSON-контракт обмена. Не зависит от движков
арифметики (src.arithmetic).
"""
