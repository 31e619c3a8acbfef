def test_root_redirects_to_catalog(client):
    response = client.get("/")
    assert response.status_code == 302
    assert response.headers["Location"] == "/catalog/"


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.get_json() == {"ok": True}


def test_index_counts(client, catalog):
    response = client.get("/catalog/")
    assert response.status_code == 200
    html = response.get_data(as_text=True)
    assert "<strong>Books:</strong> 2" in html
    assert "<strong>Copies:</strong> 1" in html
    assert "<strong>Copies available:</strong> 0" in html


def test_book_list_sorted_by_title(client, catalog):
    html = client.get("/catalog/books").get_data(as_text=True)
    assert html.index("Death Wave") < html.index("The Name of the Wind")


def test_book_detail_lists_copies(client, catalog):
    response = client.get(f"/catalog/book/{catalog['book']}")
    assert response.status_code == 200
    html = response.get_data(as_text=True)
    assert "Title: The Name of the Wind" in html
    assert f"/catalog/bookinstance/{catalog['instance']}" in html
    assert "Jun 2, 2024" in html


def test_book_detail_missing_is_404(client, catalog):
    response = client.get("/catalog/book/nope")
    assert response.status_code == 404
    assert "Book not found" in response.get_data(as_text=True)
