#!/usr/bin/env python3
"""Test runner script for the state-housing package."""

import subprocess
import sys
import os
from pathlib import Path

def check_dependencies():
    """Check if required dependencies are installed."""
    required = ['pandas', 'numpy', 'pandera', 'plotly', 'structlog', 'pytest', 'hypothesis']
    missing = []
    
    for package in required:
        try:
            __import__(package)
        except ImportError:
            missing.append(package)
    
    if missing:
        print("❌ Missing required packages:")
        for pkg in missing:
            print(f"   - {pkg}")
        print("\nTo install dependencies, run:")
        print("   pip install -e '.[test]'")
        return False
    
    print("✅ All required packages are installed")
    return True

def run_tests():
    """Run the test suite."""
    print("\n" + "="*60)
    print("Running state-housing Test Suite")
    print("="*60 + "\n")
    
    if not check_dependencies():
        return 1
    
    Path('coverage_html_report').mkdir(parents=True, exist_ok=True)
    
    cmd = [
        sys.executable, '-m', 'pytest',
        '-v',
        '--tb=short',
        '--cov=state_housing',
        '--cov-report=term-missing',
        '--cov-report=html:coverage_html_report',
        'tests/'
    ]
    
    print("\nRunning tests with command:")
    print(" ".join(cmd))
    print("\n" + "-"*60 + "\n")
    
    result = subprocess.run(cmd, cwd=os.path.dirname(os.path.abspath(__file__)))
    
    if result.returncode == 0:
        print("\n" + "="*60)
        print("✅ All tests passed!")
        print("📊 Coverage report saved to: coverage_html_report/index.html")
        print("="*60)
    else:
        print("\n" + "="*60)
        print("❌ Some tests failed. Please check the output above.")
        print("="*60)
    
    return result.returncode

if __name__ == "__main__":
    sys.exit(run_tests())
