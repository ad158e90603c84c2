"""Запуск демонстрации: python -m src.shop"""

from src.shop.demo import main

raise SystemExit(main())
