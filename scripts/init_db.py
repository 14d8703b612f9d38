#!/usr/bin/env python3
"""
Скрипт для инициализации базы данных TaskDesk
"""
import argparse
import asyncio
from sqlalchemy import text
from taskdesk.core.config import settings
from taskdesk.db.database import engine, init_db, drop_db, close_db


async def check_connection() -> bool:
    """Проверка подключения к БД"""
    print("Проверка подключения к базе данных...")
    try:
        async with engine.begin() as conn:
            await conn.execute(text("SELECT 1"))
    except Exception as e:
        print(f"Ошибка подключения к БД: {e}")
        print("Проверьте настройки DATABASE_URL в .env файле")
        return False

    print("Подключение к БД успешно")
    return True


async def main(reset: bool = False):
    """Главная функция"""
    print(f"Инициализация базы данных {settings.APP_NAME}: {settings.DATABASE_URL}")

    try:
        if not await check_connection():
            return

        if reset:
            await drop_db()
            print("Таблицы удалены")

        await init_db()
        print("Таблицы успешно созданы")
    finally:
        await close_db()

    print("\nЗапустите приложение: taskdesk (или uvicorn taskdesk.main:app --reload)")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Создание таблиц TaskDesk")
    parser.add_argument("--reset", action="store_true", help="удалить таблицы перед созданием")
    args = parser.parse_args()

    try:
        asyncio.run(main(reset=args.reset))
    except KeyboardInterrupt:
        print("\nОтменено пользователем")
