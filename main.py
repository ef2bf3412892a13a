#!/usr/bin/env python3
"""
Main entry point for the Restaurant Inventory System.
This script checks the dashboard dependencies and starts the dashboard.
"""
import logging
import sys

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger('main')


def check_dependencies(component):
    """
    Check if required dependencies are installed for specific components

    Args:
        component: The component to check dependencies for ('dashboard', 'client')

    Returns:
        bool: True if dependencies are met, False otherwise
    """
    required_packages = {
        'client': ['requests'],
        'dashboard': ['dash', 'dash_bootstrap_components', 'plotly', 'pandas'],
    }

    if component not in required_packages:
        return True

    missing_packages = []
    for package in required_packages.get(component, []):
        try:
            __import__(package)
        except ImportError:
            missing_packages.append(package)

    if missing_packages:
        names = ' '.join(package.replace('_', '-') for package in missing_packages)
        message = f"Missing dependencies for {component}: {', '.join(missing_packages)}. Please install with: pip install {names}"
        logger.warning(message)
        print(message)
        return False

    return True


def main(argv=None):
    """
    Parse arguments and run the dashboard
    """
    if not (check_dependencies('client') and check_dependencies('dashboard')):
        return 1

    from ui.dashboard import main as run_dashboard
    return run_dashboard(argv)


if __name__ == "__main__":
    sys.exit(main())
