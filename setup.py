"""
Setup script for CSRT Track real-time object tracking playback
"""

from setuptools import setup, find_packages

setup(
    name="csrt-track",
    version="1.0.0",
    description="Real-time video playback with OpenCV CSRT object tracking",
    author="CSRT Track Team",
    packages=find_packages(exclude=["tests", "tests.*", "examples"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.19.0",
        "opencv-contrib-python>=4.5.0",
        "PyYAML>=5.4",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "csrt-track=csrt_track.main:main",
        ],
    },
)
