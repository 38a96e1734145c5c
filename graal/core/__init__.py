"""
Core: алгоритмы над диапазонами, контракты и модели тестовых векторов.

Модули ядра не зависят от файловой системы и внешних систем;
файлы читают только contracts и harness.
"""
