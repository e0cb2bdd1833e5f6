from solscan_api.query import append_array_params, append_param

BASE = "https://pro-api.solscan.io/v2.0/token/list"


class TestAppendParam:
    def test_opens_query_string(self):
        assert append_param(BASE, "page", 1) == f"{BASE}?page=1"

    def test_uses_ampersand_after_first_param(self):
        url = append_param(f"{BASE}?page=1", "page_size", 20)
        assert url == f"{BASE}?page=1&page_size=20"

    def test_params_keep_call_order(self):
        url = append_param(BASE, "a", "1")
        url = append_param(url, "b", "2")
        url = append_param(url, "c", "3")
        assert url == f"{BASE}?a=1&b=2&c=3"

    def test_booleans_are_lowercase(self):
        assert append_param(BASE, "hide_zero", True).endswith("hide_zero=true")
        assert append_param(BASE, "hide_zero", False).endswith("hide_zero=false")

    def test_integral_float_drops_fraction(self):
        assert append_param(BASE, "from_amount", 5.0).endswith("from_amount=5")
        assert append_param(BASE, "from_amount", 0.25).endswith("from_amount=0.25")

    def test_value_is_percent_encoded(self):
        url = append_param(BASE, "q", "a b&c=d/e")
        assert url == f"{BASE}?q=a%20b%26c%3Dd%2Fe"

    def test_encode_uri_component_safe_chars_kept(self):
        assert append_param(BASE, "q", "a-b_c.d~e!f*g'h(i)") == f"{BASE}?q=a-b_c.d~e!f*g'h(i)"

    def test_input_url_unchanged(self):
        original = BASE
        append_param(original, "page", 1)
        assert original == BASE


class TestAppendArrayParams:
    def test_empty_values_leave_url_unchanged(self):
        assert append_array_params(BASE, "token", []) == BASE
        assert append_array_params(f"{BASE}?page=1", "token", []) == f"{BASE}?page=1"

    def test_one_pair_per_value_in_order(self):
        url = append_array_params(BASE, "token", ["A", "B", "C"])
        assert url == f"{BASE}?token[]=A&token[]=B&token[]=C"
        assert url.count("token[]=") == 3

    def test_appends_to_existing_query(self):
        url = append_array_params(f"{BASE}?page=1", "block_time", [1700000000, 1700086400])
        assert url == f"{BASE}?page=1&block_time[]=1700000000&block_time[]=1700086400"

    def test_values_are_encoded(self):
        assert append_array_params(BASE, "source", ["a b"]) == f"{BASE}?source[]=a%20b"

    def test_mixed_with_scalar_params(self):
        url = append_param(BASE, "address", "X")
        url = append_array_params(url, "amount", [1, 2])
        url = append_param(url, "flow", "in")
        assert url == f"{BASE}?address=X&amount[]=1&amount[]=2&flow=in"
