"""
Metro Segment - Build Script

Installs the metro_segment package and the metro-segment command.
"""

from setuptools import setup, find_packages


setup(
    name='metro-segment',
    version='1.0.0',
    author='Metro Segment Team',
    description='Track distance, travel time and straight-line distance between metro stops',
    long_description='''
    Computes per-segment track distance, elapsed time and great-circle
    distance for an itinerary over a multi-line transit network, e.g.
    "계양역(arex) 김포공항역(9) 노량진역".
    ''',
    packages=find_packages(include=['metro_segment', 'metro_segment.*']),
    install_requires=[
        'pydantic>=2.0',
        'python-dotenv>=1.0.0',
        'fastapi>=0.100.0',
    ],
    extras_require={
        'server': [
            'uvicorn>=0.23.0',
        ],
        'test': [
            'pytest>=7.0',
            'pytest-mock>=3.10',
            'pytest-cov>=4.0',
            'httpx>=0.24.0',
            'uvicorn>=0.23.0',
        ],
    },
    entry_points={
        'console_scripts': [
            'metro-segment=metro_segment.main:main',
        ],
    },
    zip_safe=False,
    python_requires='>=3.8',
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'Topic :: Scientific/Engineering :: GIS',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.8',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
    ],
)
