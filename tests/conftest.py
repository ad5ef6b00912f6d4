import pytest

from wine_sieve import Wine


@pytest.fixture
def catalog() -> list[Wine]:
    return [
        Wine(
            wine_name="Chateau Margaux",
            country="France",
            subregion="Bordeaux",
            vintage=2015,
            wine_type="Red",
            grape_or_style="Cabernet Sauvignon",
            alcohol=13.5,
            tannin=5,
            body=5,
            aromas=["Cedar", "Blackcurrant"],
            price_krw=1200000,
        ),
        Wine(
            wine_name="Louis Jadot Pinot Noir",
            country="France",
            subregion="Burgundy",
            vintage=2019,
            wine_type="Red",
            grape_or_style="Pinot Noir",
            alcohol=12.5,
            tannin=2,
            body=2,
            aromas=["Cherry", "Earth"],
            price_krw=45000,
        ),
        Wine(
            wine_name="Casillero del Diablo",
            country="Chile",
            subregion="Central Valley",
            vintage=2021,
            wine_type="Red",
            grape_or_style="Cabernet Sauvignon",
            alcohol=13.5,
            tannin=3,
            body=4,
            aromas=["Blackberry", "Vanilla"],
            price_krw=15000,
        ),
        Wine(
            wine_name="Woodbridge Chardonnay",
            country="USA",
            subregion="Central Valley",
            vintage=None,
            wine_type="White",
            grape_or_style="Chardonnay",
            alcohol=13.5,
            tannin=None,
            body=3,
            aromas=["Vanilla", "Butter"],
            price_krw=18000,
        ),
        Wine(
            wine_name="Cloudy Bay",
            country="New Zealand",
            subregion="Marlborough",
            vintage=2023,
            wine_type="White",
            grape_or_style="Sauvignon Blanc",
            alcohol=13.0,
            body=2,
            aromas=["Lime"],
            price_krw=None,
        ),
    ]
