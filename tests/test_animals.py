import pytest
import requests
import responses

from aryzona import animals

CAT_API = "https://api.thecatapi.com/v1/images/search"
FOX_API = "https://randomfox.ca/floof/"


@pytest.fixture
def mocked():
    with responses.RequestsMock(assert_all_requests_are_fired=False) as rsps:
        yield rsps


def test_cat_url_comes_from_first_result(mocked):
    cat_url = "https://cats.example.com/cat.jpg"
    mocked.add(responses.GET, CAT_API, json=[{"url": cat_url, "id": "x"}])
    assert animals.get_random_cat() == cat_url


def test_cat_without_results_is_empty(mocked):
    mocked.add(responses.GET, CAT_API, json=[])
    assert animals.get_random_cat() == ""


def test_dog_url_is_built_from_name(mocked):
    name = "puppy.mp4"
    mocked.add(responses.GET, "https://random.dog/woof", body=name)
    assert animals.get_random_dog() == "https://random.dog/" + name


def test_dog_image_asks_for_jpeg(mocked):
    name = "puppy.jpg"
    mocked.add(responses.GET, "https://random.dog/woof?include=jpg", body=name)
    assert animals.get_random_dog_image() == "https://random.dog/" + name
    assert mocked.calls[0].request.url.endswith("woof?include=jpg")


def test_fox_url(mocked):
    fox_url = "https://foxes.example.com/fox.jpg"
    mocked.add(responses.GET, FOX_API, json={"image": fox_url, "link": "x"})
    assert animals.get_random_fox() == fox_url


def test_fox_missing_image_is_empty(mocked):
    mocked.add(responses.GET, FOX_API, json={"link": "x"})
    assert animals.get_random_fox() == ""


def test_http_error_raises(mocked):
    mocked.add(responses.GET, "https://random.dog/woof", status=500)
    with pytest.raises(requests.HTTPError):
        animals.get_random_dog()