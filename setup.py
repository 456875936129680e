import setuptools

setuptools.setup(
  name="ndassign",
  version="0.0.1",
  author="borgwang",
  author_email="badbobobo@gamil.com",
  description="Strided slice assignment for n-dimensional arrays",
  long_description="Broadcast, cast and assign values into strided views of n-dimensional arrays",
  long_description_content_type="text/markdown",
  packages=setuptools.find_packages(include=["ndassign", "ndassign.*"]),
  classifiers=[
      "Programming Language :: Python :: 3",
      "License :: OSI Approved :: MIT License",
  ],
  install_requires=["numpy"],
  python_requires=">=3.8",
  extras_require={
    "linting": ["flake8", "pylint", "mypy", "pre-commit"],
    "testing": ["pytest"],
  }
)
