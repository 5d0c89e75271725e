"""Static Indonesian regional lookup tables.

Names, addresses, phone prefixes, brands, categories and review phrases used
by the field inference rules and the entity generators. The helper functions
at the bottom only combine table entries with draws from a
:class:`~context_synth.core.random_source.RandomSource`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from context_synth.core.random_source import RandomSource

COUNTRY = "Indonesia"
CURRENCY = "IDR"

MALE_NAMES = [
    "Agus", "Ahmad", "Andi", "Budi", "Dani", "Dedi", "Eka", "Fadil", "Gilang",
    "Hendra", "Irwan", "Joko", "Kiki", "Lukman", "Made", "Nanda", "Oki",
    "Pandu", "Reza", "Sandi", "Tono", "Ujang", "Vino", "Wawan", "Yudi", "Zaki",
    "Adit", "Bayu", "Candra", "Dimas", "Eko", "Fajar", "Galih", "Hadi",
    "Indra", "Jaya", "Krisna", "Luthfi", "Maulana", "Nabil", "Omar", "Panji",
    "Rama", "Satrio", "Teguh", "Usman", "Wahyu", "Yusuf", "Zulfikar", "Arif",
    "Bima", "Doni", "Erwin", "Gunawan", "Hakim", "Ivan", "Rian", "Yoga",
]

FEMALE_NAMES = [
    "Ayu", "Bella", "Citra", "Desi", "Elsa", "Fitri", "Gita", "Hani", "Indah",
    "Jihan", "Kartika", "Layla", "Maya", "Nisa", "Olivia", "Putri", "Rara",
    "Sari", "Tari", "Ulfa", "Vina", "Wulan", "Yuni", "Zahra", "Anisa",
    "Bunga", "Cahya", "Dewi", "Erna", "Fani", "Galuh", "Hesti", "Ika",
    "Jasmine", "Kirana", "Lina", "Mega", "Nadia", "Rina", "Sinta", "Tiara",
    "Yulia", "Zaskia", "Amelia", "Bianca", "Clara",
]

LAST_NAMES = [
    "Santoso", "Wijaya", "Kurniawan", "Sari", "Lestari", "Pratama", "Wibowo",
    "Susanto", "Permana", "Rahayu", "Sutrisno", "Hidayat", "Setiawan",
    "Purnomo", "Utomo", "Cahyono", "Nugroho", "Priyanto", "Suryadi",
    "Marpaung", "Simanjuntak", "Sitorus", "Panjaitan", "Siahaan", "Hutapea",
    "Pardede", "Manurung", "Simbolon", "Nababan", "Situmorang", "Silalahi",
    "Hasibuan", "Siregar", "Nainggolan", "Sinaga", "Ginting", "Tarigan",
    "Sembiring", "Nasution", "Lubis", "Harahap", "Tanjung", "Batubara",
]

CITIES = [
    "Jakarta", "Surabaya", "Bandung", "Bekasi", "Medan", "Tangerang", "Depok",
    "Semarang", "Palembang", "Makassar", "Batam", "Bogor", "Pekanbaru",
    "Bandar Lampung", "Malang", "Padang", "Yogyakarta", "Samarinda",
    "Denpasar", "Balikpapan", "Pontianak", "Jambi", "Cimahi", "Surakarta",
    "Manado", "Serang", "Cilegon", "Mataram", "Banjarmasin", "Tegal",
    "Cirebon", "Sukabumi", "Pekalongan", "Magelang",
]

PROVINCES = {
    "DKI Jakarta": ["Jakarta"],
    "Jawa Barat": ["Bandung", "Bekasi", "Bogor", "Depok", "Cimahi", "Sukabumi", "Cirebon"],
    "Jawa Timur": ["Surabaya", "Malang"],
    "Jawa Tengah": ["Semarang", "Surakarta", "Tegal", "Pekalongan", "Magelang"],
    "DI Yogyakarta": ["Yogyakarta"],
    "Sumatera Utara": ["Medan"],
    "Sumatera Barat": ["Padang"],
    "Sumatera Selatan": ["Palembang"],
    "Banten": ["Tangerang", "Serang", "Cilegon"],
    "Bali": ["Denpasar"],
    "Kalimantan Timur": ["Balikpapan", "Samarinda"],
    "Sulawesi Selatan": ["Makassar"],
}

DEFAULT_PROVINCE = "Jawa Barat"

STREET_NAMES = [
    "Jl. Sudirman", "Jl. Thamrin", "Jl. Gatot Subroto", "Jl. Rasuna Said",
    "Jl. Kuningan", "Jl. Merdeka", "Jl. Diponegoro", "Jl. Ahmad Yani",
    "Jl. Gajah Mada", "Jl. Hayam Wuruk", "Jl. Veteran", "Jl. Proklamasi",
    "Jl. Kebon Sirih", "Jl. Menteng", "Jl. Cempaka Putih", "Jl. Pramuka",
    "Jl. Matraman", "Jl. Salemba", "Jl. Cikini", "Jl. Kramat", "Jl. Senen",
    "Jl. Kemayoran", "Jl. Pluit", "Jl. Kelapa Gading", "Jl. Sunter",
    "Jl. Bintaro", "Jl. Pondok Indah", "Jl. Kemang", "Jl. Ampera",
    "Jl. Warung Buncit", "Jl. Pasar Minggu", "Jl. Ragunan",
]

PHONE_PREFIXES = [
    "0811", "0812", "0813", "0814", "0815", "0816", "0817", "0818", "0819",
    "0821", "0822", "0823", "0851", "0852", "0853", "0855", "0856", "0857",
    "0858",
]

EMAIL_DOMAINS = ["gmail.com", "yahoo.com", "hotmail.com", "outlook.com", "ymail.com"]

BRANDS_BY_CATEGORY = {
    "electronics": [
        "Samsung", "Apple", "Xiaomi", "Oppo", "Vivo", "Realme", "Asus", "Acer",
        "Lenovo", "Dell", "HP", "Sony", "LG", "Panasonic", "Sharp", "Polytron",
    ],
    "fashion": [
        "Uniqlo", "H&M", "Zara", "Adidas", "Nike", "Puma", "Cardinal", "Hammer",
        "Eiger", "Consina", "Tzu", "Erigo", "Greenlight", "Cottonink", "Minimal",
    ],
    "home": [
        "Panasonic", "Sharp", "Polytron", "LG", "Samsung", "Philips",
        "Electrolux", "Oxone", "Miyako", "Cosmos", "Maspion", "Lock&Lock",
    ],
    "books": [
        "Gramedia", "Erlangga", "Mizan", "Bentang Pustaka", "Republika",
        "Kompas", "Elex Media", "Grasindo", "Andi Publisher",
    ],
    "food": [
        "Indomie", "Sedaap", "ABC", "Bango", "Royco", "Masako", "Sajiku",
        "Teh Botol Sosro", "Aqua", "Le Minerale", "Pocari Sweat", "Indofood",
        "Mayora", "Khong Guan",
    ],
    "health": [
        "Wardah", "Emina", "Pigeon", "Cussons", "Lifebuoy", "Dove", "Garnier",
        "Olay", "Ponds", "Vaseline", "Nivea", "Biore",
    ],
    "sports": [
        "Adidas", "Nike", "Puma", "Specs", "Ortuseight", "Mizuno", "Yonex",
        "Li-Ning", "Diadora", "Umbro", "Kappa", "Eagle",
    ],
}

PRODUCT_CATEGORIES = {
    "electronics": [
        "smartphone", "laptop", "tablet", "headphone", "speaker", "camera",
        "smartwatch", "keyboard", "mouse", "monitor", "tv",
    ],
    "fashion": [
        "kaos", "kemeja", "celana", "dress", "rok", "jaket", "sepatu", "sandal",
        "tas", "dompet", "jam tangan", "topi",
    ],
    "home": [
        "furniture", "dekorasi", "peralatan dapur", "peralatan mandi",
        "bedding", "lampu", "karpet", "gorden",
    ],
    "books": [
        "novel", "komik", "buku pelajaran", "buku motivasi", "buku masak",
        "majalah", "kamus",
    ],
    "food": [
        "makanan ringan", "minuman", "bumbu masak", "makanan instan",
        "kue kering", "coklat", "roti",
    ],
    "health": [
        "vitamin", "suplemen", "alat kesehatan", "skincare", "makeup",
        "parfum", "sabun", "shampo",
    ],
    "sports": [
        "sepatu olahraga", "baju olahraga", "alat fitness", "bola", "raket",
        "sepeda", "matras yoga", "dumbbell",
    ],
}

PAYMENT_METHODS = [
    "GoPay", "OVO", "DANA", "ShopeePay", "LinkAja", "Transfer Bank",
    "BCA Virtual Account", "Mandiri Virtual Account", "BNI Virtual Account",
    "BRI Virtual Account", "Alfamart", "Indomaret", "Credit Card",
    "Debit Card", "COD", "QRIS", "PayLater", "Kredivo", "Akulaku",
]

ORDER_STATUSES = [
    "pending", "confirmed", "processing", "shipped", "delivered", "completed",
    "cancelled", "refunded", "returned", "failed",
]

GENDERS = ["male", "female"]

ACCOUNT_STATUSES = ["active", "inactive", "pending", "suspended"]

REVIEW_TITLES = [
    "Barang bagus banget!", "Sesuai ekspektasi", "Kualitas oke",
    "Recommended!", "Puas dengan pembelian", "Barang original",
    "Pengiriman cepat", "Worth it banget", "Gak nyesel beli",
    "Barang sesuai foto", "Pelayanan memuaskan", "Packingnya rapi",
    "Harga sebanding kualitas", "Seller responsif", "Sesuai deskripsi",
]

POSITIVE_REVIEW_COMMENTS = [
    "Barangnya bagus banget, sesuai dengan yang di foto. Pengiriman juga cepat. Terima kasih!",
    "Kualitas produk sangat baik, material premium dan finishing rapi. Recommended seller!",
    "Produk ori dan berkualitas. Pengiriman cepat dan packing aman. Pasti order lagi.",
    "Sangat puas dengan pembelian ini. Barang berkualitas tinggi dan awet.",
    "Produk original dan sesuai deskripsi. Packingnya rapi dan aman sampai tujuan.",
    "Sesuai dengan gambar dan deskripsi. Kualitas baik dan harga bersaing.",
    "Produk berkualitas dengan harga yang wajar. Pengiriman tepat waktu.",
    "Barang ori dan kondisi mulus. Penjual komunikatif dan fast respon.",
]

MIXED_REVIEW_COMMENT = "Produk lumayan, tapi ada beberapa kekurangan."
NEGATIVE_REVIEW_COMMENT = "Produk sangat mengecewakan, tidak sesuai harapan."


def province_for_city(city: str) -> str:
    for province, cities in PROVINCES.items():
        if city in cities:
            return province
    return DEFAULT_PROVINCE


def first_name(source: RandomSource, gender: str | None = None) -> str:
    if gender is None:
        gender = source.choice(GENDERS)
    return source.choice(MALE_NAMES if gender == "male" else FEMALE_NAMES)


def last_name(source: RandomSource) -> str:
    return source.choice(LAST_NAMES)


def full_name(source: RandomSource) -> str:
    return f"{first_name(source)} {last_name(source)}"


def phone_number(source: RandomSource) -> str:
    return f"{source.choice(PHONE_PREFIXES)}{source.random_int(1_000_000, 9_999_999)}"


def email(source: RandomSource, first: str | None = None, last: str | None = None) -> str:
    first = first or first_name(source)
    last = last or last_name(source)
    separator = source.choice(["", ".", "_", ""])
    suffix = source.choice(
        ["", str(source.random_int(1, 999)), str(source.random_int(10, 99))]
    )
    username = f"{first.lower()}{separator}{last.lower()}{suffix}"
    return f"{username}@{source.choice(EMAIL_DOMAINS)}"


def street_address(source: RandomSource) -> str:
    street = source.choice(STREET_NAMES)
    number = source.random_int(1, 999)
    rt = source.random_int(1, 20)
    rw = source.random_int(1, 15)
    return f"{street} No. {number}, RT {rt:02d}/RW {rw:02d}"


def postal_code(source: RandomSource) -> str:
    return str(source.random_int(10000, 99999))


def sku(source: RandomSource, category: str) -> str:
    return f"{category[:3].upper()}{source.random_int(100000, 999999)}"
