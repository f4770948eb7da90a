"""
Transit Segment - Build Script

Installs the transit_segment package, its packaged fallback line data and the
transit-segment console script.
"""

from setuptools import setup, find_namespace_packages


setup(
    name='transit-segment',
    version='1.0.0',
    description='Track distance, straight-line distance and travel time between subway stops',
    long_description='''
    Computes per-leg track distance, haversine straight-line distance and
    estimated travel time for a multi-leg subway journey on the Seoul Metro
    network, from a CLI or a small FastAPI service.
    ''',
    packages=find_namespace_packages(include=['transit_segment', 'transit_segment.*']),
    package_data={'transit_segment': ['data/*.json']},
    include_package_data=True,
    install_requires=[
        'fastapi>=0.100.0',
        'pydantic>=2.0',
        'python-dotenv>=1.0.0',
        'uvicorn>=0.23.0',
    ],
    extras_require={
        'test': [
            'pytest>=7.0',
            'pytest-mock>=3.10',
            'httpx>=0.24',
        ],
    },
    entry_points={
        'console_scripts': [
            'transit-segment=transit_segment.cli:main',
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
    ],
)
