from setuptools import find_packages, setup

setup(
    name="cleavage-oligo-designer",
    version="0.1",
    packages=find_packages(include=["cleavage_oligo_designer", "cleavage_oligo_designer.*"]),
    package_data={"cleavage_oligo_designer": ["data/*.yaml", "data/configs/*.yaml"]},
    install_requires=[
        "pandas",
        "biopython",
        "pyyaml",
        "joblib",
        "joblib-progress",
    ],
    extras_require={"test": ["pytest"]},
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    entry_points={
        "console_scripts": [
            "cleavage_oligo_designer = cleavage_oligo_designer.pipelines._cleavage_oligo_designer:main"
        ]
    },
)
