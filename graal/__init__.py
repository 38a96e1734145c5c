"""
graal — generic range algorithms.

Обобщённые алгоритмы над полуоткрытыми диапазонами [first, last).
"""
