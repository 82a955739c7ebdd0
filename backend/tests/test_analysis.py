from fastapi.testclient import TestClient


def test_top_words(client: TestClient, sample_text: str):
    """Test the top words endpoint and its top_n parameter."""
    response = client.post("/analyze/words?top_n=2", json={"text": sample_text})

    assert response.status_code == 200
    assert response.json()["words"] == [
        {"word": "the", "count": 2},
        {"word": "cat", "count": 2},
    ]

    # Default of ten words
    response = client.post("/analyze/words", json={"text": sample_text})
    assert len(response.json()["words"]) == 4


def test_top_words_invalid_top_n(client: TestClient, sample_text: str):
    """Test that top_n outside 1-100 is rejected."""
    response = client.post("/analyze/words?top_n=0", json={"text": sample_text})
    assert response.status_code == 422

    response = client.post("/analyze/words?top_n=101", json={"text": sample_text})
    assert response.status_code == 422


def test_character_frequency(client: TestClient, sample_text: str):
    """Test the character frequency endpoint."""
    response = client.post("/analyze/characters", json={"text": sample_text})

    assert response.status_code == 200
    characters = response.json()["characters"]
    assert characters[0] == {"character": "t", "count": 5}
    assert len(characters) == 8


def test_duplicates(client: TestClient, multi_paragraph_text: str):
    """Test the duplicate words endpoint with and without a limit."""
    response = client.post("/analyze/duplicates", json={"text": multi_paragraph_text})

    assert response.status_code == 200
    words = [d["word"] for d in response.json()["duplicates"]]
    assert words == ["is", "the", "it"]

    response = client.post(
        "/analyze/duplicates?limit=2", json={"text": multi_paragraph_text}
    )
    assert len(response.json()["duplicates"]) == 2


def test_time_estimates(client: TestClient):
    """Test the preset time estimates."""
    text = "word " * 500
    response = client.post("/analyze/time", json={"text": text})

    assert response.status_code == 200
    data = response.json()
    assert data["word_count"] == 500
    assert data["reading_time"] == "3 min"
    assert data["speaking_time"] == "4 min"
    assert data["skimming_time"] == "1 min"
    assert data["custom_time"] is None


def test_time_estimates_custom_speed(client: TestClient):
    """Test a custom words-per-minute speed."""
    text = "word " * 500
    response = client.post(
        "/analyze/time?words_per_minute=100", json={"text": text}
    )

    assert response.status_code == 200
    data = response.json()
    assert data["custom_time"] == "5 min"
    assert data["words_per_minute"] == 100

    response = client.post("/analyze/time?words_per_minute=0", json={"text": text})
    assert response.status_code == 422


def test_time_estimates_speed_below_one(client: TestClient):
    """Test that speeds below one word per minute are rejected, not a 500."""
    text = "word " * 10
    response = client.post(
        "/analyze/time?words_per_minute=1e-320", json={"text": text}
    )
    assert response.status_code == 422

    response = client.post("/analyze/time?words_per_minute=0.5", json={"text": text})
    assert response.status_code == 422

    response = client.post("/analyze/time?words_per_minute=1", json={"text": text})
    assert response.status_code == 200
    assert response.json()["custom_time"] == "10 min"
