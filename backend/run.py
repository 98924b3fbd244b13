#!/usr/bin/env python3
"""
KursusKu Backend - Startup Script
Run this file to start the server with proper configuration
"""

import os
import sys
from pathlib import Path


def check_environment():
    """Check if environment is properly set up"""
    print("🔍 Checking environment setup...")

    from dotenv import load_dotenv
    if Path(".env").exists():
        load_dotenv()
    else:
        print("⚠️  WARNING: .env file not found, using process environment only")

    required_vars = [
        'SUPABASE_URL',
        'SUPABASE_ANON_KEY',
        'SUPABASE_SERVICE_ROLE_KEY',
    ]

    missing = [var for var in required_vars if not os.getenv(var)]

    if missing:
        print("❌ ERROR: Missing required environment variables:")
        for var in missing:
            print(f"   - {var}")
        print("\n📝 Please update your .env file")
        return False

    if not os.getenv('ADMIN_EMAILS'):
        print("⚠️  WARNING: ADMIN_EMAILS is empty, admin routes will reject everyone")

    print("✅ Environment check passed!")
    return True


def print_startup_info(port: int):
    """Print startup information"""
    print("\n🚀 Starting server...")
    print("\n📚 Once started, you can access:")
    print(f"   • API Docs (Swagger): http://localhost:{port}/docs")
    print(f"   • Health Check:       http://localhost:{port}/")
    print("\n💡 Press CTRL+C to stop the server")
    print("\n" + "="*55 + "\n")


def main():
    """Main startup function"""
    if not check_environment():
        sys.exit(1)

    try:
        import uvicorn
        from app.config import settings

        print_startup_info(settings.port)

        uvicorn.run(
            "app.main:app",
            host=settings.host,
            port=settings.port,
            reload=settings.debug,
            log_level=settings.LOG_LEVEL.lower()
        )
    except KeyboardInterrupt:
        print("\n\n👋 Server stopped by user")
    except Exception as e:
        print(f"\n❌ ERROR: Failed to start server: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
