import setuptools

with open('README.md') as f:
    readme = f.read()

with open('VERSION') as f:
    version = f.read().strip()


setuptools.setup(
  name='taggrep',
  version=version,
  description='Pattern search over tagged French text',
  long_description=readme,
  long_description_content_type='text/markdown',
  install_requires=[
      "plac>=1.3.0",
      "spacy>=3.2.0",
      "ordered-set>=4.0.2"
  ],
  extras_require={
      "test": ["pytest"]
  },
  package_dir={"": "src"},
  packages=["tagcore", "taggrep", "taggrep.test"],
  scripts=["scripts/tgrep.py"],
  include_package_data=True,
  platforms='any'
)
