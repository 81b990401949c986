from chromastate.strings.resolvers import matplotlib_resolver, no_resolver


def test_matplotlib_resolver_named_colors():
    assert matplotlib_resolver("red") == "rgb(255,0,0)"
    assert matplotlib_resolver("rebeccapurple") == "rgb(102,51,153)"


def test_matplotlib_resolver_transparent():
    assert matplotlib_resolver("none") == "rgba(0,0,0,0)"


def test_matplotlib_resolver_passes_rgb_through():
    assert matplotlib_resolver("rgba(1,2,3,0.5)") == "rgba(1,2,3,0.5)"


def test_matplotlib_resolver_unknown():
    assert matplotlib_resolver("notacolorname") is None


def test_no_resolver():
    assert no_resolver("red") is None
