[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sentimentkit"
version = "0.1.0"
description = "Text sentiment classification with bag-of-words or TF-IDF features and multinomial Naive Bayes"
requires-python = ">=3.10"
dependencies = []
keywords = ["sentiment", "nlp", "naive-bayes", "tf-idf", "text-classification"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
    "Topic :: Text Processing :: Linguistic",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sentimentkit = "sentimentkit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["sentimentkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
