#!/usr/bin/env python3
"""
Initialize a BalanceBooks workspace.

This script sets up the project by:
- Checking the Python version
- Loading optional environment overrides
- Validating the business configuration file
- Creating export directories
- Running a sample pay statement as a smoke test
"""

import os
import sys
from pathlib import Path

import yaml
from dotenv import load_dotenv

REQUIRED_SECTIONS = ["company", "pay_statements", "logging"]


def check_python_version() -> bool:
    """Verify Python version is 3.12 or higher."""
    if sys.version_info < (3, 12):
        print(f"❌ Python 3.12+ required. Current version: {sys.version}")
        return False
    print(f"✅ Python version: {sys.version_info.major}.{sys.version_info.minor}")
    return True


def load_environment() -> bool:
    """Load .env overrides if present."""
    if not Path(".env").exists():
        print("⚠️  No .env file; using config/config.yaml defaults")
        print("   Optional: cp .env.example .env")
        return True

    load_dotenv()
    overrides = [
        var for var in ("BALANCEBOOKS_CONFIG_DIR", "LOG_LEVEL", "LOG_FORMAT") if os.getenv(var)
    ]
    print(f"✅ .env loaded ({', '.join(overrides) or 'no overrides'})")
    return True


def check_config_file() -> bool:
    """Validate config.yaml exists, parses, and has the expected sections."""
    config_dir = Path(os.getenv("BALANCEBOOKS_CONFIG_DIR") or "config")
    config_path = config_dir / "config.yaml"
    if not config_path.exists():
        print(f"❌ Business configuration not found: {config_path}")
        return False

    try:
        with open(config_path) as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        print(f"❌ Error parsing {config_path}: {e}")
        return False

    if not config:
        print(f"❌ {config_path} is empty")
        return False

    missing = [section for section in REQUIRED_SECTIONS if section not in config]
    if missing:
        print(f"⚠️  Sections using defaults: {', '.join(missing)}")
    print(f"✅ {config_path} is valid YAML")
    return True


def create_data_directories() -> bool:
    """Create directories for exported statements and logs."""
    directories = [
        "data/exports/statements",
        "data/exports/ifta",
        "logs",
    ]

    for directory in directories:
        Path(directory).mkdir(parents=True, exist_ok=True)

    print(f"✅ Created {len(directories)} data directories")
    return True


def run_sample_statement() -> bool:
    """Generate a sample statement to confirm the package is installed."""
    try:
        from balancebooks.engine import generate_pay_statement
    except ImportError as e:
        print(f"❌ balancebooks is not importable: {e}")
        print("   Run: pip install -e .")
        return False

    statement = generate_pay_statement(
        {"id": "sample", "firstName": "Sample", "lastName": "Driver",
         "paymentType": "per_mile", "payRate": "0.55"},
        [{"loadedMiles": 500, "deadheadMiles": 50, "rate": 1200}],
        [],
        "2024-01-01",
        "2024-01-07",
    )
    print(f"✅ Sample statement net pay: ${statement.net_pay:.2f}")
    return True


def main():
    """Run all initialization checks."""
    print("=" * 60)
    print("BalanceBooks Trucking - Initialization")
    print("=" * 60)

    checks = [
        ("Python version", check_python_version),
        ("Environment", load_environment),
        ("Configuration file", check_config_file),
        ("Data directories", create_data_directories),
        ("Sample statement", run_sample_statement),
    ]

    passed = 0
    failed = 0

    for name, check_func in checks:
        print(f"\nChecking {name}...")
        if check_func():
            passed += 1
        else:
            failed += 1

    print("\n" + "=" * 60)
    print(f"Results: {passed} passed, {failed} failed")
    print("=" * 60)

    if failed == 0:
        print("\nReady. Try: python -m balancebooks.engine.settlement")
        return 0
    else:
        print("\n❌ Some checks failed. Please fix the issues above.")
        return 1


if __name__ == "__main__":
    sys.exit(main())
