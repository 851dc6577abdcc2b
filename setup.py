import re
import setuptools
from pathlib import Path

# Read the contents of README file
this_directory = Path(__file__).parent
readme_text = (this_directory / "README.md").read_text()
requirements = (this_directory / "requirements.txt").read_text().splitlines()
version = re.search(
    r'__version__ = "([^"]+)"', (this_directory / "sealedenums" / "_version.py").read_text()
).group(1)

setuptools.setup(
    include_package_data=True,
    name="sealedenums",
    version=version,
    description="sealed, registered enumerations of described constant values",
    author="sealedenums developers",
    package_data={"sealedenums": ["py.typed"]},
    packages=setuptools.find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.9",
    install_requires=requirements,
    extras_require={"test": ["pytest"]},
    long_description=readme_text,  # Provide entire contents of README to long_description
    long_description_content_type="text/markdown",
)
