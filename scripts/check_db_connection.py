"""Script to check the database connection."""
import asyncio

from dotenv import load_dotenv
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import create_async_engine


async def check_connection() -> None:
    """Check the database connection using DATABASE_URL from the .env file."""
    load_dotenv()

    # Imported after .env is loaded so settings pick it up
    from tindev.core.config import get_settings

    database_url = get_settings().DATABASE_URL
    engine = create_async_engine(database_url)
    try:
        async with engine.connect() as connection:
            await connection.execute(text("SELECT 1"))
            print("✅ Successfully connected to the database!")
            print(f"Server version: {connection.dialect.server_version_info}")
    except SQLAlchemyError as e:
        print("❌ Database connection failed!")
        print(f"Error: {str(e)}")
    finally:
        await engine.dispose()


if __name__ == "__main__":
    asyncio.run(check_connection())
