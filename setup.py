from setuptools import setup

setup(
    name =             "panemove",
    version =          "0.0.1",
    author =           "Christoph Landgraf",
    author_email =     "christoph.landgraf@googlemail.com",
    description =      "Directional window navigation for Text UIs",
    license =          "BSD",
    url =              "https://github.com/clandgraf/cui",
    packages =         ['panemove', 'panemove.windows'],
    python_requires =  ">=3.6",
    extras_require =   {'test': ['pytest']},
)
