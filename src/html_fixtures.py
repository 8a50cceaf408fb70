"""HTML pages and constants shared by the tests."""

from datetime import datetime, timezone


ORIGIN = "https://cookpad.test"

FIXED_TIME = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)


SEARCH_PAGE_WITH_CARDS = """
<html><body>
  <ul class="search-results">
    <li class="recipe-card">
      <a href="/id/resep/101-ayam-goreng">
        <img data-src="/images/101.jpg">
        <h2>Ayam Goreng Kuning</h2>
      </a>
      <span class="cooking-time">45 menit</span>
      <span class="servings">Untuk 3 orang</span>
      <div class="ingredients">
        <span class="ingredient">500 gr ayam</span>
        <span class="ingredient">3 siung bawang putih</span>
      </div>
    </li>
    <li class="recipe-card">
      <a href="https://cookpad.test/id/resep/102-sayur-asem">
        <img src="https://img.cookpad.test/102.jpg">
        <h3>  Sayur Asem  </h3>
      </a>
    </li>
    <li class="recipe-card">
      <a href="/id/resep/103"><img src="/images/103.jpg"></a>
    </li>
  </ul>
</body></html>
"""

SEARCH_PAGE_WITH_LINKS = """
<html><body>
  <div class="results">
    <a href="/id/resep/201-nasi-goreng">Nasi Goreng</a>
    <a href="/id/resep/202-soto-ayam">Soto Ayam</a>
    <a href="/id/resep/201-nasi-goreng#comments">Comments</a>
    <a href="/about">About</a>
  </div>
</body></html>
"""

DETAIL_PAGE = """
<html>
<head>
  <meta property="og:image" content="/images/201-large.jpg">
</head>
<body>
  <h1>Nasi Goreng Kampung</h1>
  <div class="serving-size">Porsi: 2 orang</div>
  <div class="cook-time">25 menit</div>
  <div class="ingredient-list">
    <h3 class="ingredient-list__title">Bahan-bahan</h3>
    <ul>
      <li>2 piring nasi putih</li>
      <li>3 siung bawang merah (iris tipis)</li>
      <li>2 sdm kecap manis</li>
      <li>1 sdt</li>
    </ul>
  </div>
  <ol class="steps">
    <li class="step"><p>Haluskan bawang merah dan cabai.</p></li>
    <li class="step"><p>Oke</p></li>
    <li class="step"><p>Tumis bumbu sampai harum, masukkan nasi.</p></li>
  </ol>
</body>
</html>
"""

DETAIL_PAGE_JSON_LD = """
<html>
<head>
<script type="application/ld+json">
{"@context": "https://schema.org", "@graph": [
  {"@type": "WebPage", "name": "Soto"},
  {"@type": "Recipe",
   "name": "Soto Ayam Lamongan",
   "image": ["https://img.cookpad.test/202.jpg"],
   "recipeIngredient": ["1 ekor ayam", "2 batang serai", "1 liter air"],
   "recipeInstructions": [
     {"@type": "HowToStep", "text": "Rebus ayam bersama serai hingga empuk."},
     {"@type": "HowToStep", "text": "Suwir ayam, sajikan dengan kuah."}
   ],
   "recipeYield": "6 servings",
   "totalTime": "PT1H30M"}
]}
</script>
</head>
<body><h1>Soto page heading</h1><img src="/logo.png"></body>
</html>
"""
