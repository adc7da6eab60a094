"""Install canvas auth package."""

from setuptools import setup, find_packages

setup(
    name='canvas-auth',
    version='0.1.0',
    packages=find_packages(exclude=['*test*']),
    install_requires=[
        "flask",
        "werkzeug",
        "requests",
        "click",
        "python-json-logger>=3.1"
    ],
    extras_require={
        'test': [
            "pytest",
            "hypothesis"
        ]
    },
    entry_points={
        'console_scripts': [
            'canvas-signed-request=canvas_auth.generate:generate_signed_request'
        ]
    },
    zip_safe=False
)
