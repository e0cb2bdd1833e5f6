from conftest import PRO, called_url

NFT = f"{PRO}nft/"


class TestNftNews:
    def test_default_filter(self, api, client):
        api.nft.news()
        assert called_url(client) == f"{NFT}news?filter=created_time"

    def test_options(self, api, client):
        api.nft.news(filter="updated_time", page=2, page_size=12)
        assert called_url(client) == f"{NFT}news?filter=updated_time&page=2&page_size=12"


class TestNftActivities:
    def test_default_page(self, api, client):
        api.nft.activities()
        assert called_url(client) == f"{NFT}activities?page=1"

    def test_all_options(self, api, client):
        api.nft.activities(
            activity_type=["ACTIVITY_NFT_SOLD"],
            from_address="F",
            to_address="T",
            currency_token="CT",
            collection="COL",
            price=[1, 10],
            source=["magic_eden"],
            token="TK",
            block_time=[100, 200],
            page=4,
            page_size=24,
        )

        assert called_url(client) == (
            f"{NFT}activities?page=4&activity_type[]=ACTIVITY_NFT_SOLD&from=F&to=T"
            "&currency_token=CT&collection=COL&price[]=1&price[]=10"
            "&source[]=magic_eden&token=TK&block_time[]=100&block_time[]=200&page_size=24"
        )

    def test_price_dropped_without_currency_token(self, api, client):
        api.nft.activities(price=[1, 10], collection="COL")

        url = called_url(client)
        assert "price[]" not in url
        assert url == f"{NFT}activities?page=1&collection=COL"

    def test_currency_token_sent_without_price(self, api, client):
        api.nft.activities(currency_token="CT")
        assert called_url(client) == f"{NFT}activities?page=1&currency_token=CT"


class TestNftCollections:
    def test_collection_lists_default_range(self, api, client):
        api.nft.collection_lists()
        assert called_url(client) == f"{NFT}collection/lists?range=1"

    def test_collection_lists_options(self, api, client):
        api.nft.collection_lists(range=7, collection="COL", page=1, page_size=10, sort_by="volumes", sort_order="desc")
        assert called_url(client) == (
            f"{NFT}collection/lists?range=7&collection=COL&page=1&page_size=10&sort_by=volumes&sort_order=desc"
        )

    def test_collection_items(self, api, client):
        api.nft.collection_items("COL", page=2, sort_by="last_trade")
        assert called_url(client) == f"{NFT}collection/items?collection=COL&page=2&sort_by=last_trade"
